"""Main CLI entry point for the module configurator."""

import sys

import click

from ..utils import setup_logging
from .configure_command import configure
from .status_command import status


@click.group(invoke_without_command=True)
@click.pass_context
@click.help_option("-h", "--help")
def main(ctx):
    """Module Configurator - Reconcile module enable/disable flags during install or upgrade."""
    setup_logging()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        sys.exit(1)


main.add_command(configure)
main.add_command(status)
