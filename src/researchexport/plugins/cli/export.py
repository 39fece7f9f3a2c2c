"""
CLI command: export

Fetches every target of a target set, flattens the results and delivers the
combined JSON array to a sink.
"""

import logging
from typing import Optional

import click

from researchexport.data import INTERNAL_RESEARCH, get_fetcher, load_target_set
from researchexport.data.sinks import get_sink, list_sinks
from researchexport.exceptions import ExportError
from researchexport.pipeline import AggregatingFetcher
from researchexport.settings import settings

# Configure module-level logger
logger = logging.getLogger("researchexport.cli.export")


@click.command("export")
@click.option(
    "--targets",
    "target_file",
    type=click.Path(dir_okay=False),
    help="YAML target set file (defaults to the built-in internal-research set)",
)
@click.option(
    "--sink",
    type=click.Choice(list_sinks(), case_sensitive=False),
    default=settings.default_sink,
    show_default=True,
    help="Where to deliver the export",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    help="Directory for the file sink",
)
@click.option("--filename", help="File name for file-based sinks")
@click.option("--max-workers", type=click.IntRange(min=1), help="Concurrency cap")
@click.option("--base-url", default=None, help="Base URL for relative targets")
@click.option(
    "--check-status/--no-check-status",
    default=settings.check_status,
    help="Treat non-2xx responses as failures",
)
@click.option("--indent", type=click.IntRange(min=0), help="Indent the JSON output")
def cli(
    target_file: Optional[str],
    sink: str,
    output_dir: Optional[str],
    filename: Optional[str],
    max_workers: Optional[int],
    base_url: Optional[str],
    check_status: bool,
    indent: Optional[int],
) -> None:
    """
    Export all targets of a target set as one JSON array.
    """
    try:
        target_set = load_target_set(target_file) if target_file else INTERNAL_RESEARCH
    except (FileNotFoundError, ValueError) as e:
        logger.error("Cannot load target set %s: %s", target_file, e)
        click.echo(f"Error: {e}")
        raise click.Abort()

    sink_options = {}
    if sink in ("file", "datauri"):
        sink_options["filename"] = filename or target_set.filename
    if sink == "file" and output_dir:
        sink_options["output_dir"] = output_dir

    fetcher = get_fetcher(
        base_url=base_url or settings.base_url,
        timeout=settings.request_timeout,
        check_status=check_status,
    )
    pipeline = AggregatingFetcher(
        sink=get_sink(sink, **sink_options),
        fetcher=fetcher,
        max_workers=max_workers,
        indent=indent,
    )

    logger.info(
        "Exporting target set '%s' (%d targets)",
        target_set.name,
        len(target_set.targets),
    )
    try:
        result = pipeline.run(target_set.targets)
    except ExportError as e:
        logger.error("Export failed for target %s: %s", e.target, e)
        click.echo(f"✗ Export failed: {e}", err=True)
        raise click.Abort()

    if result.location:
        click.echo(
            f"✓ {result.record_count} records from {result.target_count} targets "
            f"written to {result.location}"
        )
