"""Handoff command: pass current work to the agent's next session."""

import click

from gastown.cli.ensure_ideal import EnsureIdeal
from gastown.core.context import GtContext
from gastown.core.services.sling_service import handoff_work
from gastown.output import user_output


@click.command("handoff")
@click.argument("bead_id")
@click.option("--agent", help="Agent handing off (default: GT_AGENT or config)")
@click.option("--subject", help="Subject line for the handoff")
@click.option("--context", "context_text", help="Notes for the next session")
@click.pass_obj
def handoff_cmd(
    ctx: GtContext,
    bead_id: str,
    agent: str | None,
    subject: str | None,
    context_text: str | None,
) -> None:
    """Hook BEAD_ID to this agent so the next session resumes it."""
    resolved_agent = EnsureIdeal.agent(ctx, agent)
    result = EnsureIdeal.ideal_state(
        handoff_work(
            ctx.hooks,
            ctx.beads,
            ctx.time,
            bead_id=bead_id,
            agent=resolved_agent,
            subject=subject,
            context=context_text,
        )
    )
    user_output(click.style("✓ ", fg="green") + f"Handed off {bead_id} ({result.hook.subject})")
    user_output("  The next session picks it up with: gt prime")
