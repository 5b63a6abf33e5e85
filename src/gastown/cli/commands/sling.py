"""Sling command: attach a bead to another agent's hook."""

import click

from gastown.cli.ensure_ideal import EnsureIdeal
from gastown.core.config import resolve_agent
from gastown.core.context import GtContext
from gastown.core.services.sling_service import sling_work
from gastown.output import user_output

OPERATOR_IDENTITY = "operator"


@click.command("sling")
@click.argument("bead_id")
@click.argument("target")
@click.option("--context", "context_text", help="Extra context for the receiving agent")
@click.option("--subject", help="Subject line for the assignment")
@click.option("--from", "created_by", help="Identity of the slinger (default: current agent)")
@click.option(
    "--notify/--no-notify",
    default=True,
    help="Send ephemeral LIFECYCLE mail to the target (default: notify)",
)
@click.pass_obj
def sling_cmd(
    ctx: GtContext,
    bead_id: str,
    target: str,
    context_text: str | None,
    subject: str | None,
    created_by: str | None,
    notify: bool,
) -> None:
    """Attach BEAD_ID to TARGET's hook.

    The target picks the work up on its next session start with `gt prime`.

    Examples:

    \b
      gt sling gt-abc nux
      gt sling gt-abc crew/joe --context "see review comments"
    """
    slinger = resolve_agent(created_by, ctx.config)
    result = EnsureIdeal.ideal_state(
        sling_work(
            ctx.hooks,
            ctx.beads,
            ctx.time,
            bead_id=bead_id,
            target=target,
            created_by=slinger if slinger is not None else OPERATOR_IDENTITY,
            context=context_text,
            subject=subject,
            notify=notify,
        )
    )

    if result.created.superseded is not None:
        user_output(
            click.style("Warning: ", fg="yellow")
            + f"superseded pending work {result.created.superseded} on {target}'s hook"
        )
    user_output(click.style("✓ ", fg="green") + f"Slung {bead_id} to {target}")
    if result.notification is not None:
        user_output(f"  Notified {target} ({result.notification.id})")
