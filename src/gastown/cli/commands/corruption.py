"""Shared reporting for corrupted hook files."""

import click

from gastown.core.context import GtContext
from gastown.gateway.hooks.types import HookCorruptedError, hook_filename
from gastown.output import user_output


def report_corrupted_hook(ctx: GtContext, error: HookCorruptedError) -> None:
    """Tell the operator which slot is corrupted and that resume was halted."""
    location = ctx.config.hook_dir / hook_filename(error.agent)
    user_output(click.style("Error: ", fg="red") + str(error))
    user_output(f"Automatic resume halted. Inspect {location}, then fix it or run:")
    user_output(f"  gt hook burn --agent {error.agent}")
