"""
Fetchers: turn a request target into a parsed result set.
"""

from .fetcher_base import BaseFetcher, RequestTarget, as_targets  # noqa: F401
from .fetcher_factory import (  # noqa: F401
    FetcherRegistry,
    get_fetcher,
    get_fetcher_info,
    list_fetcher_types,
    register_fetcher,
)
from .fetchers import FetchManager, HttpJsonFetcher  # noqa: F401
