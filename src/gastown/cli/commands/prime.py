"""Prime command: session-start pickup of hooked work."""

import click

from gastown.cli.commands.corruption import report_corrupted_hook
from gastown.cli.ensure_ideal import EnsureIdeal
from gastown.core.context import GtContext
from gastown.core.services.prime_service import NoHookedWork, resume_hooked_work
from gastown.gateway.hooks.types import HookCorruptedError
from gastown.output import user_output


@click.command("prime")
@click.option("--agent", help="Agent starting up (default: GT_AGENT or config)")
@click.pass_obj
def prime_cmd(ctx: GtContext, agent: str | None) -> None:
    """Resume work hooked to this agent.

    Reads the hook, marks the bead in_progress and assigned to the agent,
    then burns the hook. Safe to rerun after a crash at any step.
    """
    resolved_agent = EnsureIdeal.agent(ctx, agent)
    try:
        outcome = resume_hooked_work(ctx.hooks, ctx.beads, agent=resolved_agent)
    except HookCorruptedError as e:
        report_corrupted_hook(ctx, e)
        raise SystemExit(1) from None

    if isinstance(outcome, NoHookedWork):
        user_output(outcome.message)
        return

    result = EnsureIdeal.ideal_state(outcome)
    verb = "Resumed (already accepted)" if result.already_accepted else "Resumed"
    user_output(click.style("✓ ", fg="green") + f"{verb} {result.issue.id}: {result.issue.title}")
    if result.hook.subject is not None:
        user_output(f"  Subject: {result.hook.subject}")
    if result.hook.context is not None:
        user_output(f"  Context: {result.hook.context}")
