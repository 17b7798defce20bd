"""Status command implementation."""

import logging
import sys

import click

from ..config import ConfigurationDocument, ConfiguratorError
from ..configurators import GATING_MODULE
from ..factory import ConfiguratorResolver
from ..output import ClickOutput
from ..utils import setup_logging

logger = logging.getLogger(__name__)


@click.command()
@click.argument("modules", nargs=-1)
@click.option(
    "--project-dir",
    "-d",
    type=click.Path(file_okay=False),
    default=None,
    help="Project root (defaults to MODCONFIGURATOR_PROJECT_DIR or the current directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose (debug) logging")
@click.help_option("-h", "--help")
def status(modules, project_dir, verbose):
    """Show the recorded state of MODULES (all configured modules by default)."""
    if verbose:
        setup_logging("DEBUG")

    try:
        document = ConfiguratorResolver(ClickOutput()).get_document(project_dir)
    except ConfiguratorError as e:
        logger.error(f"Failed to read configuration: {e}")
        click.echo(f"Failed to read configuration: {e}", err=True)
        sys.exit(1)

    if not isinstance(document, ConfigurationDocument):
        click.echo("No modules section in configuration; nothing is configured yet.")
        return

    gating_enabled = ConfiguratorResolver.is_gating_module_enabled(document)
    click.echo(f"Configuration: {document.source.path}")
    click.echo(f"{GATING_MODULE} enabled: {'yes' if gating_enabled else 'no'}")

    for module_name in modules or document.modules.keys():
        state = document.module_state(module_name)
        click.echo(f"  {module_name}: {state.value}")

    if not modules and not document.modules:
        click.echo("  (no modules configured)")
