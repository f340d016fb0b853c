"""
Document loaders: parse HTML from a buffer, a stream, a local file or a URL.

Every loader returns the ``BeautifulSoup`` document for the content it read,
or raises one of the errors in :mod:`restify.errors` wrapping the cause.
"""

from __future__ import annotations

import os
from typing import IO, Any, Callable, Mapping, Optional, Union
from urllib.parse import unquote, urlsplit

import httpx
import structlog
from bs4 import BeautifulSoup, FeatureNotFound
from bs4.builder import ParserRejectedMarkup

from .config import settings
from .errors import OpenError, ParseError, RequestBuildError, TransportError

logger = structlog.get_logger(__name__)

RequestConfig = Callable[[httpx.Request], None]
URLLike = Union[str, httpx.URL]


def with_headers(headers: Mapping[str, str]) -> RequestConfig:
    """Return a request config that sets each header, replacing any existing value."""

    def configure(request: httpx.Request) -> None:
        for name, value in headers.items():
            request.headers[name] = value

    return configure


def _parse(
    markup: Union[bytes, str], *, source: str, what: str, parser: Optional[str], **kwargs: Any
) -> BeautifulSoup:
    features = parser or settings.loader.parser
    try:
        return BeautifulSoup(markup, features, **kwargs)
    except (ParserRejectedMarkup, FeatureNotFound) as exc:
        logger.warning("Failed to parse document", source=source, what=what, parser=features, error=str(exc))
        raise ParseError(source, exc, what=what) from exc


def load_buffer(buffer: Union[bytes, str], *, parser: Optional[str] = None) -> BeautifulSoup:
    """Parse an in-memory HTML buffer."""
    logger.debug("Loading buffer", size=len(buffer))
    return _parse(buffer, source="buffer", what="buffer", parser=parser)


def load_reader(stream: IO[bytes], *, parser: Optional[str] = None) -> BeautifulSoup:
    """Read ``stream`` to EOF and parse it. The stream is left open."""
    try:
        data = stream.read()
    except (OSError, ValueError) as exc:
        logger.warning("Failed to read stream", error=str(exc))
        raise ParseError("reader", exc, what="reader") from exc
    logger.debug("Loading reader", size=len(data))
    return _parse(data, source="reader", what="reader", parser=parser)


def _file_path(url: Union[URLLike, "os.PathLike[str]"]) -> str:
    if isinstance(url, os.PathLike):
        return os.fspath(url)
    return unquote(urlsplit(str(url)).path)


def load_file(
    url: Union[URLLike, "os.PathLike[str]"],
    user_agent: str = "",
    *configs: RequestConfig,
    parser: Optional[str] = None,
) -> BeautifulSoup:
    """Parse the local file named by the path component of ``url``.

    ``user_agent`` and ``configs`` are accepted so that file URLs can be routed
    through :func:`load_content`; they have no effect on a local read.
    """
    logger.debug("Loading file", url=str(url))
    try:
        path = _file_path(url)
        handle = open(path, "rb")
    except ValueError as exc:
        logger.warning("Failed to open file", url=str(url), error=str(exc))
        raise OpenError(str(url), exc) from exc
    except OSError as exc:
        logger.warning("Failed to open file", path=path, error=str(exc))
        raise OpenError(path, exc) from exc

    with handle:
        try:
            data = handle.read()
        except OSError as exc:
            logger.warning("Failed to read file", path=path, error=str(exc))
            raise ParseError(path, exc, what="file") from exc

    return _parse(data, source=path, what="file", parser=parser)


def _build_request(
    client: httpx.Client,
    url: URLLike,
    user_agent: str,
    configs: tuple[RequestConfig, ...],
    timeout: float,
) -> httpx.Request:
    headers = {"accept": settings.loader.accept}
    if user_agent:
        headers["user-agent"] = user_agent

    try:
        request = client.build_request("GET", url, headers=headers, timeout=timeout)
        for config in configs:
            config(request)
    except (httpx.InvalidURL, ValueError, TypeError) as exc:
        logger.warning("Failed to build request", url=str(url), error=str(exc))
        raise RequestBuildError(str(url), exc) from exc
    return request


def _fetch(client: httpx.Client, request: httpx.Request, parser: Optional[str]) -> BeautifulSoup:
    source = str(request.url)
    try:
        response = client.send(request, stream=True)
    except httpx.HTTPError as exc:
        logger.warning("Failed to retrieve response", url=source, error=str(exc))
        raise TransportError(source, exc) from exc

    try:
        body = response.read()
    except httpx.HTTPError as exc:
        logger.warning("Failed to read response body", url=source, error=str(exc))
        raise ParseError(source, exc, what="response body") from exc
    finally:
        response.close()

    logger.debug(
        "Response received",
        url=source,
        final_url=str(response.url),
        status=response.status_code,
        size=len(body),
    )
    return _parse(
        body,
        source=source,
        what="response body",
        parser=parser,
        from_encoding=response.charset_encoding,
    )


def load_content(
    url: URLLike,
    user_agent: str = "",
    *configs: RequestConfig,
    timeout: Optional[float] = None,
    client: Optional[httpx.Client] = None,
    parser: Optional[str] = None,
) -> BeautifulSoup:
    """Retrieve and parse the HTML content at ``url``.

    ``file`` URLs are read from disk by :func:`load_file`. Any other URL is
    fetched with a GET carrying ``accept: */*`` and, when ``user_agent`` is
    non-empty, a ``user-agent`` header; each of ``configs`` then gets to adjust
    the request. The body is parsed whatever the response status.

    Args:
        url: Address of the document.
        user_agent: Optional User-Agent header value.
        configs: Callbacks applied to the outgoing request, e.g. :func:`with_headers`.
        timeout: Request timeout in seconds. Defaults to ``settings.loader.timeout``.
        client: Client to send the request with. It is not closed. When omitted a
            client is created for this call only.
        parser: BeautifulSoup tree builder. Defaults to ``settings.loader.parser``.

    Raises:
        OpenError: a ``file`` URL names a file that cannot be opened.
        RequestBuildError: the request could not be constructed.
        TransportError: the request failed or timed out.
        ParseError: the body could not be read or parsed.
    """
    try:
        scheme = urlsplit(str(url)).scheme.lower()
    except ValueError as exc:
        logger.warning("Failed to build request", url=str(url), error=str(exc))
        raise RequestBuildError(str(url), exc) from exc
    if scheme == "file":
        return load_file(url, user_agent, *configs, parser=parser)

    loader_config = settings.loader
    if timeout is None:
        timeout = loader_config.timeout
    user_agent = user_agent or loader_config.user_agent

    logger.debug("Loading content", url=str(url), timeout=timeout)

    if client is not None:
        request = _build_request(client, url, user_agent, configs, timeout)
        return _fetch(client, request, parser)

    with httpx.Client(follow_redirects=loader_config.follow_redirects) as owned_client:
        # httpx sends its own user-agent by default; only the caller's may go out.
        owned_client.headers.pop("user-agent", None)
        request = _build_request(owned_client, url, user_agent, configs, timeout)
        return _fetch(owned_client, request, parser)
