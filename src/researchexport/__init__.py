"""
researchexport: fetch research-portal searches and export them as one JSON array.

Subpackages
-----------
- data:      request targets, fetchers and output sinks
- pipeline:  the fetch-aggregate-export pipeline
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version(__name__)
except PackageNotFoundError:  # local editable install
    __version__ = "0.0.0-dev"

__all__ = [
    "data",
    "pipeline",
]

from . import data, pipeline
