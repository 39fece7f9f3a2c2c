"""
Fetcher registry with decorator-based registration.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from .fetcher_base import BaseFetcher

logger = logging.getLogger(__name__)


class FetcherRegistry:
    """
    Registry for fetcher classes, keyed by fetcher type.
    """

    _fetchers: Dict[str, Type[BaseFetcher]] = {}
    _default_fetcher: Optional[Type[BaseFetcher]] = None

    @classmethod
    def register(
        cls,
        fetcher_type: str,
        fetcher_class: Type[BaseFetcher],
        is_default: bool = False,
    ) -> None:
        """
        Register a fetcher class for a specific type.

        Args:
            fetcher_type: Unique identifier for the fetcher
            fetcher_class: Fetcher class that inherits from BaseFetcher
            is_default: Whether this should be the default fetcher
        """
        if not issubclass(fetcher_class, BaseFetcher):
            raise ValueError(
                f"Fetcher class must inherit from BaseFetcher: {fetcher_class}"
            )

        cls._fetchers[fetcher_type] = fetcher_class

        if is_default:
            cls._default_fetcher = fetcher_class

        logger.debug(f"Registered fetcher: {fetcher_type} -> {fetcher_class.__name__}")

    @classmethod
    def unregister(cls, fetcher_type: str) -> None:
        """
        Remove a fetcher from the registry.
        """
        if fetcher_type in cls._fetchers:
            fetcher_class = cls._fetchers.pop(fetcher_type)
            if fetcher_class is cls._default_fetcher:
                cls._default_fetcher = None
            logger.debug(f"Unregistered fetcher: {fetcher_type}")

    @classmethod
    def get_available_types(cls) -> List[str]:
        """
        Get list of all registered fetcher types.
        """
        return list(cls._fetchers.keys())

    @classmethod
    def get_fetcher_class(cls, fetcher_type: str) -> Type[BaseFetcher]:
        """
        Get a specific fetcher class by type.
        """
        if fetcher_type not in cls._fetchers:
            raise ValueError(f"Unknown fetcher type: {fetcher_type}")
        return cls._fetchers[fetcher_type]

    @classmethod
    def create_fetcher(
        cls, fetcher_type: Optional[str] = None, **options: Any
    ) -> BaseFetcher:
        """
        Create a fetcher instance.

        Args:
            fetcher_type: Specific fetcher type to use, or None for the default
            **options: Keyword arguments passed to the fetcher constructor

        Returns:
            Configured fetcher instance
        """
        if fetcher_type:
            return cls.get_fetcher_class(fetcher_type)(**options)

        if cls._default_fetcher is None:
            raise ValueError("No default fetcher registered")
        return cls._default_fetcher(**options)

    @classmethod
    def get_info(cls) -> Dict[str, str]:
        """
        Get information about all registered fetchers.
        """
        info = {}
        for fetcher_type, fetcher_class in cls._fetchers.items():
            default_marker = (
                " (default)" if fetcher_class == cls._default_fetcher else ""
            )
            doc = (fetcher_class.__doc__ or "No description").strip().splitlines()[0]
            info[fetcher_type] = f"{fetcher_class.__name__}{default_marker} - {doc}"
        return info


def register_fetcher(
    fetcher_type: str,
    fetcher_class: Optional[Type[BaseFetcher]] = None,
    is_default: bool = False,
):
    """
    Decorator and function for registering fetchers.

    Can be used as:
    1. Function: register_fetcher("my_type", MyFetcher)
    2. Decorator: @register_fetcher("my_type")
    3. Decorator with default: @register_fetcher("my_type", is_default=True)
    """

    def decorator(cls: Type[BaseFetcher]) -> Type[BaseFetcher]:
        FetcherRegistry.register(fetcher_type, cls, is_default)
        return cls

    if fetcher_class is not None:
        FetcherRegistry.register(fetcher_type, fetcher_class, is_default)
        return fetcher_class
    return decorator


def get_fetcher(fetcher_type: Optional[str] = None, **options: Any) -> BaseFetcher:
    """
    Create a fetcher by type, or the default fetcher.

    This is the main entry point for creating fetchers.
    """
    return FetcherRegistry.create_fetcher(fetcher_type, **options)


def list_fetcher_types() -> List[str]:
    """
    List all available fetcher types.
    """
    return FetcherRegistry.get_available_types()


def get_fetcher_info() -> Dict[str, str]:
    """
    Get information about all available fetchers.
    """
    return FetcherRegistry.get_info()
