"""
Factory for creating output sinks by name.
"""

import logging
from typing import Any, Dict, List, Type

from .sink_base import BaseSink
from .sinks import ConsoleSink, DataUriSink, LocalFileSink

logger = logging.getLogger(__name__)


class SinkRegistry:
    """
    Registry mapping sink names to sink classes.
    """

    def __init__(self):
        self._sinks: Dict[str, Type[BaseSink]] = {}
        self._register_default_sinks()

    def _register_default_sinks(self) -> None:
        """
        Register the built-in sinks.
        """
        self.register_sink("console", ConsoleSink)
        self.register_sink("file", LocalFileSink)
        self.register_sink("datauri", DataUriSink)

    def register_sink(self, sink_name: str, sink_class: Type[BaseSink]) -> None:
        """
        Register a sink class under a name.
        """
        if not issubclass(sink_class, BaseSink):
            raise ValueError(f"Sink class must inherit from BaseSink: {sink_class}")

        self._sinks[sink_name] = sink_class
        logger.debug(f"Registered sink: {sink_name} -> {sink_class.__name__}")

    def unregister_sink(self, sink_name: str) -> None:
        if sink_name in self._sinks:
            del self._sinks[sink_name]
            logger.debug(f"Unregistered sink: {sink_name}")

    def get_available_sinks(self) -> List[str]:
        return list(self._sinks.keys())

    def create_sink(self, sink_name: str, **options: Any) -> BaseSink:
        """
        Create a sink by name, passing options to its constructor.
        """
        key = sink_name.lower()
        if key not in self._sinks:
            raise ValueError(
                f"Unknown sink: {sink_name}. "
                f"Available sinks: {self.get_available_sinks()}"
            )

        sink = self._sinks[key](**options)
        logger.debug(f"Created {sink} for export")
        return sink

    def get_sink_info(self) -> Dict[str, str]:
        info = {}
        for sink_name, sink_class in self._sinks.items():
            doc = (sink_class.__doc__ or "No description").strip().splitlines()[0]
            info[sink_name] = f"{sink_class.__name__} - {doc}"
        return info


# Global registry instance
sink_registry = SinkRegistry()


def get_sink(sink_name: str, **options: Any) -> BaseSink:
    """
    Convenience function to create a sink from the global registry.
    """
    return sink_registry.create_sink(sink_name, **options)


def register_custom_sink(sink_name: str, sink_class: Type[BaseSink]) -> None:
    """
    Convenience function to register a custom sink.
    """
    sink_registry.register_sink(sink_name, sink_class)


def list_sinks() -> List[str]:
    return sink_registry.get_available_sinks()


def get_sink_info() -> Dict[str, str]:
    return sink_registry.get_sink_info()
