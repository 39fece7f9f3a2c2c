"""
Exceptions raised by the fetch-aggregate-export pipeline.
"""

from typing import Optional


class ExportError(Exception):
    """
    Base class for failures that abort an export run.
    """

    def __init__(self, message: str, target: Optional[str] = None):
        super().__init__(message)
        self.target = target


class TransportError(ExportError):
    """
    Raised when a request could not be completed.
    """

    pass


class ParseError(ExportError):
    """
    Raised when a response body is not valid JSON.
    """

    pass
