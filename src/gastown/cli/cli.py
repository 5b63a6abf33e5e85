import logging

import click

from gastown.cli.commands.doctor import doctor_cmd
from gastown.cli.commands.handoff import handoff_cmd
from gastown.cli.commands.hook import hook_group
from gastown.cli.commands.mail import mail_group
from gastown.cli.commands.prime import prime_cmd
from gastown.cli.commands.sling import sling_cmd
from gastown.cli.commands.sync import sync_cmd
from gastown.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gastown")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--dry-run", is_flag=True, help="Show what would change without writing")
@click.option("--verbose", is_flag=True, help="Print each issue store mutation")
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool, verbose: bool) -> None:
    """Hand work between Gas Town agents."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run, verbose=verbose)


cli.add_command(doctor_cmd)
cli.add_command(handoff_cmd)
cli.add_command(hook_group)
cli.add_command(mail_group)
cli.add_command(prime_cmd)
cli.add_command(sling_cmd)
cli.add_command(sync_cmd)


def main() -> None:
    """CLI entry point used by the `gt` console script."""
    cli()
