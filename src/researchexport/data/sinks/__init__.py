"""
Output sinks for the serialized aggregate.
"""

from .sink_base import BaseSink, FileDeliverySink, NamedFile  # noqa: F401
from .sink_factory import (  # noqa: F401
    SinkRegistry,
    get_sink,
    get_sink_info,
    list_sinks,
    register_custom_sink,
)
from .sinks import ConsoleSink, DataUriSink, LocalFileSink  # noqa: F401
