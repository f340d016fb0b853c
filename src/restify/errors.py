"""
Exceptions raised by the restify loaders.

Every error wraps the exception that caused it (``raise ... from cause``) and
records what was being loaded in ``source``.
"""

from __future__ import annotations

from typing import Optional


class RestifyError(Exception):
    """Base class for all restify errors."""

    prefix = ""

    def __init__(self, source: str, cause: Optional[BaseException] = None):
        self.source = source
        self.cause = cause
        message = self.prefix
        if cause is not None:
            message = f"{message}{cause}"
        super().__init__(message)


class ParseError(RestifyError):
    """Raised when the HTML parser fails on a buffer, stream, file or response body."""

    def __init__(self, source: str, cause: Optional[BaseException] = None, what: str = "buffer"):
        self.prefix = f"Failed to parse {what}: "
        super().__init__(source, cause)


class OpenError(RestifyError):
    """Raised when a local file cannot be opened."""

    prefix = "Failed to open file: "


class RequestError(RestifyError):
    """Raised when an HTTP request cannot be built or sent."""


class RequestBuildError(RequestError):
    """Raised when the outgoing request cannot be constructed."""

    prefix = "Failed to request: "


class TransportError(RequestError):
    """Raised when the request fails in transit, timeouts included."""

    prefix = "Failed to retrieve response: "
