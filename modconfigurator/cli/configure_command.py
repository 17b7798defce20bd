"""Configure command implementation."""

import logging
import sys

import click

from ..config import ConfiguratorError
from ..factory import ConfiguratorResolver
from ..output import ClickOutput
from ..utils import setup_logging

logger = logging.getLogger(__name__)


@click.command()
@click.argument("modules", nargs=-1, required=True)
@click.option(
    "--project-dir",
    "-d",
    type=click.Path(file_okay=False),
    default=None,
    help="Project root (defaults to MODCONFIGURATOR_PROJECT_DIR or the current directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose (debug) logging")
@click.help_option("-h", "--help")
def configure(modules, project_dir, verbose):
    """Enable, disable or keep each MODULE according to the current configuration."""
    if verbose:
        setup_logging("DEBUG")

    logger.info(f"Configuring {len(modules)} modules")

    try:
        resolver = ConfiguratorResolver(ClickOutput())
        configurator = resolver.create_configurator(project_dir)
        logger.debug(f"Using {type(configurator).__name__}")

        for module_name in modules:
            configurator.configure(module_name)

    except ConfiguratorError as e:
        logger.error(f"Module configuration failed: {e}")
        click.echo(f"Module configuration failed: {e}", err=True)
        sys.exit(1)
