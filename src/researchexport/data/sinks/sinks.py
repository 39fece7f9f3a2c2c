"""
Console, local-file and data-URI sinks.
"""

import logging
from pathlib import Path
from typing import IO, Optional

import click

from ...settings import settings
from .sink_base import DEFAULT_FILENAME, BaseSink, FileDeliverySink, NamedFile

logger = logging.getLogger(__name__)


class ConsoleSink(BaseSink):
    """
    Writes the serialized aggregate to a text stream (stdout by default).

    The raw per-target result sets are not echoed here; the pipeline logs them
    at DEBUG, so run with ``--log-level DEBUG`` to see them alongside the
    aggregate.
    """

    def __init__(self, stream: Optional[IO[str]] = None):
        super().__init__()
        self.stream = stream

    @property
    def sink_name(self) -> str:
        return "console"

    def deliver(self, payload: str) -> Optional[str]:
        click.echo(payload, file=self.stream)
        return None


class LocalFileSink(FileDeliverySink):
    """
    Writes the named file into a local directory.
    """

    def __init__(
        self,
        output_dir: Optional[Path] = None,
        filename: str = DEFAULT_FILENAME,
    ):
        super().__init__(filename=filename)
        self.output_dir = Path(output_dir) if output_dir else settings.output_dir

    @property
    def sink_name(self) -> str:
        return "file"

    def deliver_file(self, named_file: NamedFile) -> Optional[str]:
        path = self.output_dir / named_file.filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(named_file.content)
        self.logger.info(f"Saved {len(named_file.content)} bytes to {path}")
        return str(path)


class DataUriSink(FileDeliverySink):
    """
    Emits the named file as a ``data:`` URI that a browser can download.
    """

    def __init__(
        self,
        stream: Optional[IO[str]] = None,
        filename: str = DEFAULT_FILENAME,
    ):
        super().__init__(filename=filename)
        self.stream = stream

    @property
    def sink_name(self) -> str:
        return "datauri"

    def deliver_file(self, named_file: NamedFile) -> Optional[str]:
        click.echo(named_file.to_data_uri(), file=self.stream)
        return None
