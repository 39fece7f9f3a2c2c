"""
CLI command: info

Displays the package version, registered fetchers, sinks and target sets.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

import click

from researchexport.data import list_target_sets
from researchexport.data.fetch import get_fetcher_info
from researchexport.data.sinks import get_sink_info

logger = logging.getLogger("researchexport.cli.info")


@click.command("info")
def cli() -> None:
    """
    Show package metadata and registered pipeline components.
    """
    try:
        pkg_version = version("researchexport")
        logger.debug("Retrieved package version: %s", pkg_version)
    except PackageNotFoundError:
        pkg_version = "0.0.0-dev"
        logger.warning(
            "Package 'researchexport' not found; using development version placeholder."
        )

    click.echo(f"researchexport version: {pkg_version}")

    click.echo("\nAvailable fetchers:")
    for name, description in get_fetcher_info().items():
        click.echo(f"  - {name}: {description}")

    click.echo("\nAvailable sinks:")
    for name, description in get_sink_info().items():
        click.echo(f"  - {name}: {description}")

    click.echo("\nBuilt-in target sets:")
    for name in list_target_sets():
        click.echo(f"  - {name}")
