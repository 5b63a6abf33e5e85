"""Hook commands: inspect and burn hook slots."""

import json

import click

from gastown.cli.commands.corruption import report_corrupted_hook
from gastown.cli.ensure_ideal import EnsureIdeal
from gastown.core.context import GtContext
from gastown.gateway.hooks.types import HookCorruptedError
from gastown.output import machine_output, user_output


@click.group("hook")
def hook_group() -> None:
    """Inspect and manage per-agent hook slots."""


@hook_group.command("show")
@click.option("--agent", help="Agent whose hook to show (default: GT_AGENT or config)")
@click.option("--json", "as_json", is_flag=True, help="Print the raw hook payload as JSON")
@click.pass_obj
def show_hook(ctx: GtContext, agent: str | None, as_json: bool) -> None:
    """Show the work pending on an agent's hook. Does not consume it."""
    resolved_agent = EnsureIdeal.agent(ctx, agent)
    try:
        hook = ctx.hooks.read_hook(resolved_agent)
    except HookCorruptedError as e:
        report_corrupted_hook(ctx, e)
        raise SystemExit(1) from None

    if as_json:
        machine_output(json.dumps(hook.model_dump(mode="json") if hook is not None else None))
        return

    if hook is None:
        user_output(f"Hook for {resolved_agent} is empty")
        return

    user_output(f"Agent: {resolved_agent}")
    user_output(f"Bead: {hook.bead_id}")
    user_output(f"Type: {hook.type.value}")
    user_output(f"Created: {hook.created_at.isoformat()} by {hook.created_by}")
    if hook.subject is not None:
        user_output(f"Subject: {hook.subject}")
    if hook.context is not None:
        user_output(f"Context: {hook.context}")


@hook_group.command("burn")
@click.option("--agent", help="Agent whose hook to burn (default: GT_AGENT or config)")
@click.pass_obj
def burn_hook(ctx: GtContext, agent: str | None) -> None:
    """Remove an agent's hook. Succeeds when the hook is already empty."""
    resolved_agent = EnsureIdeal.agent(ctx, agent)
    if ctx.hooks.burn_hook(resolved_agent):
        user_output(click.style("✓ ", fg="green") + f"Burned hook for {resolved_agent}")
    else:
        user_output(f"Hook for {resolved_agent} was already empty")


@hook_group.command("list")
@click.pass_obj
def list_hooks(ctx: GtContext) -> None:
    """List agents with pending hooks."""
    agents = ctx.hooks.list_pending_agents()
    if not agents:
        user_output("No pending hooks")
        return
    for agent in agents:
        machine_output(agent)
