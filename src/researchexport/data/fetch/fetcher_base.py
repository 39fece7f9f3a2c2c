"""
Abstract base class for request-target fetchers.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Union

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class RequestTarget(BaseModel):
    """
    A resource address on the search API, kept as an opaque string.
    """

    id: str = Field(..., description="Name of the request target")
    url: str = Field(..., description="Path or URL with encoded query string")
    description: Optional[str] = Field(None, description="What the search returns")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.id


TargetLike = Union[RequestTarget, str]


def as_targets(targets: Iterable[TargetLike]) -> List[RequestTarget]:
    """
    Normalize a sequence of targets, wrapping bare strings in declaration order.
    """
    result = []
    for index, target in enumerate(targets):
        if isinstance(target, RequestTarget):
            result.append(target)
        elif isinstance(target, str):
            result.append(RequestTarget(id=f"target-{index}", url=target))
        else:
            raise TypeError(f"Unsupported request target: {target!r}")
    return result


class BaseFetcher(ABC):
    """
    Abstract base class for fetchers that turn one request target into one
    parsed result set.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        self.base_url = base_url
        self.timeout = timeout
        self.logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )

    @abstractmethod
    def can_handle(self, target: RequestTarget) -> bool:
        """
        Check if this fetcher can retrieve the given target.
        """
        pass

    @abstractmethod
    def fetch(self, target: RequestTarget) -> Any:
        """
        Retrieve the target and return its parsed body.

        Raises:
            TransportError: If the request could not be completed.
            ParseError: If the body could not be parsed.
        """
        pass

    @property
    @abstractmethod
    def fetcher_type(self) -> str:
        """
        Return the type identifier for this fetcher.
        """
        pass

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(base_url={self.base_url!r}, "
            f"timeout={self.timeout!r})"
        )
