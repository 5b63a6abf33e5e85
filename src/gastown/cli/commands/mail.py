"""Mail commands."""

import click

from gastown.cli.ensure_ideal import EnsureIdeal
from gastown.core.context import GtContext
from gastown.core.services.mail_service import list_inbox, message_sender, send_mail
from gastown.output import machine_output, user_output


@click.group("mail")
def mail_group() -> None:
    """Send and read agent mail."""


@mail_group.command("send")
@click.argument("target")
@click.option("-s", "--subject", required=True, help="Message subject")
@click.option("-m", "--message", "body", default="", help="Message body")
@click.option("--from", "sender", help="Sender identity (default: GT_AGENT or config)")
@click.option(
    "--wisp/--durable",
    "ephemeral",
    default=False,
    help="Send as ephemeral wisp, excluded from sync (default: durable)",
)
@click.pass_obj
def send_cmd(
    ctx: GtContext,
    target: str,
    subject: str,
    body: str,
    sender: str | None,
    ephemeral: bool,
) -> None:
    """Send a message to TARGET."""
    resolved_sender = EnsureIdeal.agent(ctx, sender)
    issue = send_mail(
        ctx.beads,
        sender=resolved_sender,
        target=target,
        subject=subject,
        body=body,
        ephemeral=ephemeral,
    )
    kind = "wisp" if ephemeral else "message"
    user_output(click.style("✓ ", fg="green") + f"Sent {kind} {issue.id} to {target}")


@mail_group.command("inbox")
@click.option("--agent", help="Agent whose inbox to list (default: GT_AGENT or config)")
@click.pass_obj
def inbox_cmd(ctx: GtContext, agent: str | None) -> None:
    """List open messages for an agent."""
    resolved_agent = EnsureIdeal.agent(ctx, agent)
    messages = list_inbox(ctx.beads, resolved_agent)
    if not messages:
        user_output(f"No messages for {resolved_agent}")
        return
    for message in messages:
        sender = message_sender(message) or "unknown"
        marker = " (wisp)" if message.ephemeral else ""
        machine_output(f"{message.id}\t{sender}\t{message.title}{marker}")
