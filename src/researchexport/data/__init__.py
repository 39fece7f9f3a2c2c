"""
researchexport data package: request targets, fetching and output sinks.
"""

from .fetch import (  # noqa: F401
    FetchManager,
    HttpJsonFetcher,
    RequestTarget,
    get_fetcher,
    list_fetcher_types,
)
from .sinks import get_sink, list_sinks  # noqa: F401
from .targets import (  # noqa: F401
    INTERNAL_RESEARCH,
    TargetSet,
    get_target_set,
    list_target_sets,
    load_target_set,
)

__all__ = [
    "RequestTarget",
    "HttpJsonFetcher",
    "FetchManager",
    "get_fetcher",
    "list_fetcher_types",
    "get_sink",
    "list_sinks",
    "TargetSet",
    "INTERNAL_RESEARCH",
    "get_target_set",
    "list_target_sets",
    "load_target_set",
]
