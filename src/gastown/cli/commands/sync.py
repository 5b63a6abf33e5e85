"""Sync command: write the durable export for git."""

import click

from gastown.core.context import GtContext
from gastown.output import machine_output, user_output


@click.command("sync")
@click.pass_obj
def sync_cmd(ctx: GtContext) -> None:
    """Write durable issues to the synced log.

    Ephemeral issues (wisps) stay in the local store and are never written.
    """
    count = ctx.beads.sync()
    if ctx.dry_run:
        user_output(f"[DRY RUN] Would export {count} durable issue(s)")
    machine_output(str(count))
