"""
Fetch-aggregate-export pipeline.
"""

from .aggregate import (  # noqa: F401
    AggregatingFetcher,
    ExportResult,
    fetch_all,
    flatten,
    serialize,
)

__all__ = ["AggregatingFetcher", "ExportResult", "fetch_all", "flatten", "serialize"]
