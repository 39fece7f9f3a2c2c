"""
JSON-over-HTTP fetcher and the concurrent fan-out manager.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Optional
from urllib.parse import urljoin

import requests

from ...exceptions import ParseError, TransportError
from ...settings import settings
from .fetcher_base import BaseFetcher, RequestTarget, TargetLike, as_targets
from .fetcher_factory import get_fetcher, register_fetcher

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not part of JSON
    raise ValueError(f"Invalid JSON constant: {name}")


@register_fetcher("http", is_default=True)
class HttpJsonFetcher(BaseFetcher):
    """
    Fetcher for search endpoints that answer GET requests with JSON.

    Relative targets are resolved against ``base_url``; absolute HTTP/HTTPS
    targets are requested as-is.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        check_status: bool = True,
    ):
        super().__init__(base_url=base_url, timeout=timeout)
        self.check_status = check_status

    @property
    def fetcher_type(self) -> str:
        return "http"

    def can_handle(self, target: RequestTarget) -> bool:
        """
        Check if this fetcher can retrieve the given target.
        """
        if target.url.startswith(("http://", "https://")):
            return True
        return bool(self.base_url)

    def resolve_url(self, target: RequestTarget) -> str:
        if target.url.startswith(("http://", "https://")) or not self.base_url:
            return target.url
        return urljoin(self.base_url, target.url)

    def fetch(self, target: RequestTarget) -> Any:
        """
        GET the target and parse its body as JSON.
        """
        url = self.resolve_url(target)
        self.logger.debug(f"Requesting {target.id} from {url}")

        try:
            response = requests.get(
                url, headers={"Accept": "application/json"}, timeout=self.timeout
            )
            if self.check_status:
                response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(
                f"Request for {target.id} failed: {e}", target=target.id
            ) from e

        try:
            return response.json(parse_constant=_reject_constant)
        except ValueError as e:
            raise ParseError(
                f"Response for {target.id} is not valid JSON: {e}", target=target.id
            ) from e


class FetchManager:
    """
    Issues every request target concurrently and joins on all of them.

    Result sets come back in target order whatever the completion order. The
    join is all-or-nothing: if any request fails, the first failure in target
    order is raised once every request has finished.
    """

    def __init__(
        self,
        fetcher: Optional[BaseFetcher] = None,
        max_workers: Optional[int] = None,
    ):
        self.fetcher = fetcher or get_fetcher(
            base_url=settings.base_url,
            timeout=settings.request_timeout,
            check_status=settings.check_status,
        )
        self.max_workers = (
            max_workers if max_workers is not None else settings.max_workers
        )
        self.logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )

    def fetch_result_sets(self, targets: Iterable[TargetLike]) -> List[Any]:
        """
        Fetch all targets and return one parsed result set per target.

        Raises:
            ValueError: If no targets are given or one cannot be handled.
            TransportError: If any request could not be completed.
            ParseError: If any response body is not valid JSON.
        """
        targets = as_targets(targets)
        if not targets:
            raise ValueError("At least one request target is required")

        unhandled = [t.id for t in targets if not self.fetcher.can_handle(t)]
        if unhandled:
            raise ValueError(
                f"{self.fetcher} cannot handle targets: {', '.join(unhandled)}"
            )

        workers = self.max_workers or len(targets)
        self.logger.info(
            f"Fetching {len(targets)} targets with {workers} concurrent workers"
        )

        with ThreadPoolExecutor(max_workers=workers) as ex:
            futures = [ex.submit(self._fetch_single_target, t) for t in targets]

        return [f.result() for f in futures]

    def _fetch_single_target(self, target: RequestTarget) -> Any:
        try:
            result = self.fetcher.fetch(target)
        except Exception as e:
            self.logger.error(f"Failed to fetch {target.id}: {e}")
            raise

        size = len(result) if isinstance(result, list) else 1
        self.logger.debug(f"Fetched {target.id}: {size} records")
        return result
