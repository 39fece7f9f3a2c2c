"""
Abstract base classes for output sinks.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional
from urllib.parse import quote

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "internal-research.json"
JSON_MEDIA_TYPE = "application/json"

# Characters left unescaped by a browser's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


class NamedFile(BaseModel):
    """
    A payload ready to be handed to the user as a named file.
    """

    filename: str = Field(..., description="File name offered to the user")
    media_type: str = Field(default=JSON_MEDIA_TYPE, description="MIME type")
    encoding: str = Field(default="utf-8", description="Text encoding of content")
    content: bytes = Field(..., description="Encoded file body")

    @classmethod
    def from_text(
        cls,
        filename: str,
        text: str,
        media_type: str = JSON_MEDIA_TYPE,
        encoding: str = "utf-8",
    ) -> "NamedFile":
        return cls(
            filename=filename,
            media_type=media_type,
            encoding=encoding,
            content=text.encode(encoding),
        )

    def to_data_uri(self) -> str:
        """
        Render the file as a percent-encoded ``data:`` URI.
        """
        text = self.content.decode(self.encoding)
        return (
            f"data:{self.media_type};charset={self.encoding},"
            f"{quote(text, safe=_URI_COMPONENT_SAFE)}"
        )


class BaseSink(ABC):
    """
    Destination for a serialized aggregate.
    """

    def __init__(self):
        self.logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )

    @property
    @abstractmethod
    def sink_name(self) -> str:
        """
        Return the registry name of this sink.
        """
        pass

    @abstractmethod
    def deliver(self, payload: str) -> Optional[str]:
        """
        Deliver the serialized payload.

        Returns:
            Where the payload ended up, if the sink has such a notion.
        """
        pass

    def __str__(self) -> str:
        return self.__class__.__name__


class FileDeliverySink(BaseSink):
    """
    Base for sinks that hand the payload to the user as a named file.
    """

    def __init__(self, filename: str = DEFAULT_FILENAME):
        super().__init__()
        self.filename = filename

    def deliver(self, payload: str) -> Optional[str]:
        return self.deliver_file(NamedFile.from_text(self.filename, payload))

    @abstractmethod
    def deliver_file(self, named_file: NamedFile) -> Optional[str]:
        """
        Deliver a named file to the user.
        """
        pass

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(filename={self.filename})"
