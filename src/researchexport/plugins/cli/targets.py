"""
CLI command: targets

Lists the request targets of a target set.
"""

import logging
from typing import Optional

import click

from researchexport.data import INTERNAL_RESEARCH, load_target_set

logger = logging.getLogger("researchexport.cli.targets")


@click.command("targets")
@click.argument("target_file", type=click.Path(dir_okay=False), required=False)
def cli(target_file: Optional[str]) -> None:
    """
    List the targets of TARGET_FILE, or of the built-in target set.
    """
    try:
        target_set = load_target_set(target_file) if target_file else INTERNAL_RESEARCH
    except (FileNotFoundError, ValueError) as e:
        logger.error("Cannot load target set %s: %s", target_file, e)
        click.echo(f"Error: {e}")
        raise click.Abort()

    click.echo(f"Target set: {target_set.name} -> {target_set.filename}")
    for target in target_set.targets:
        click.echo(f"  - {target.id}: {target.url}")
