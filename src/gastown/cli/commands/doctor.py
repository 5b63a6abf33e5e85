"""Doctor command for gt setup diagnostics."""

import click

from gastown.core.context import GtContext
from gastown.core.health_checks import CheckResult, run_all_checks
from gastown.output import user_output


def _format_check_result(result: CheckResult) -> None:
    """Format and display a single check result."""
    if result.passed:
        icon = click.style("✅", fg="green")
    else:
        icon = click.style("❌", fg="red")

    user_output(f"{icon} {result.message}")

    if result.details:
        for line in result.details.split("\n"):
            user_output(click.style(f"   {line}", dim=True))


@click.command("doctor")
@click.pass_obj
def doctor_cmd(ctx: GtContext) -> None:
    """Run diagnostic checks on the town's coordination setup.

    Checks for:

    \b
      - git on PATH
      - leftover .beads-wisp/ directory from the old wisp store
      - corrupted hook files
      - hook files and local issue store excluded from git
    """
    user_output(click.style("Checking gt setup...", bold=True))
    user_output("")

    results = run_all_checks(ctx)
    for result in results:
        _format_check_result(result)

    failed = [result for result in results if not result.passed]
    user_output("")
    if failed:
        user_output(click.style(f"{len(failed)} check(s) failed", fg="red"))
        raise SystemExit(1)
    user_output(click.style("All checks passed", fg="green"))
