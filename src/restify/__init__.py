"""
restify - load HTML documents from buffers, streams, files or URLs and look up
elements in them.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config, settings
from .config.config import HTTP_REQUEST_TIMEOUT
from .errors import OpenError, ParseError, RequestBuildError, RequestError, RestifyError, TransportError
from .loader import (
    RequestConfig,
    load_buffer,
    load_content,
    load_file,
    load_reader,
    with_headers,
)
from .lookup import (
    Matcher,
    attr,
    find,
    find_all,
    find_all_by_attribute,
    find_all_by_attribute_name,
    find_all_by_attribute_name_value,
    find_all_by_class,
    find_all_by_tag_name,
    find_by_id,
)

__all__ = [
    "__version__",
    "Config",
    "settings",
    # Errors
    "RestifyError",
    "ParseError",
    "OpenError",
    "RequestError",
    "RequestBuildError",
    "TransportError",
    # Loading
    "HTTP_REQUEST_TIMEOUT",
    "RequestConfig",
    "load_buffer",
    "load_reader",
    "load_file",
    "load_content",
    "with_headers",
    # Lookup
    "Matcher",
    "attr",
    "find",
    "find_all",
    "find_by_id",
    "find_all_by_class",
    "find_all_by_attribute",
    "find_all_by_attribute_name",
    "find_all_by_attribute_name_value",
    "find_all_by_tag_name",
]
