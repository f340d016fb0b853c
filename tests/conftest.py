"""
Shared test configuration for restify.

Provides sample documents, settings isolation and httpx mock transports so no
test touches the network.
"""

# Standard library imports
import os
from pathlib import Path
from typing import Callable, Generator, List

# Third-party imports
import httpx
import pytest

# Local imports
from restify.config import LazyConfig

REAL_HTTPX_CLIENT = httpx.Client

SAMPLE_HTML = b"""<!DOCTYPE html>
<html>
<head><title>Sample Page</title></head>
<body>
  <div id="main" class="container wide">
    <a class="btn" href="/one" data-x="">One</a>
    <a class="btn-primary" href="/two" data-x="2">Two</a>
    <p class="x y">text <span data-x="3">inner</span></p>
    <!-- a comment -->
  </div>
</body>
</html>
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "network: Tests requiring network access")


# ============================================================================
# Core Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test from an empty directory with no RESTIFY_* overrides."""
    for name in list(os.environ):
        if name.startswith("RESTIFY_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    LazyConfig.reset()
    yield
    LazyConfig.reset()


@pytest.fixture
def sample_html() -> bytes:
    return SAMPLE_HTML


@pytest.fixture
def html_file(tmp_path: Path) -> Path:
    """Write the sample document to disk."""
    path = tmp_path / "sample page.html"
    path.write_bytes(SAMPLE_HTML)
    return path


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replies with a fixed response."""

    def __init__(self, body: bytes = SAMPLE_HTML, status_code: int = 200, headers=None):
        self.body = body
        self.status_code = status_code
        self.headers = headers or {"content-type": "text/html"}
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, headers=self.headers, content=self.body)


@pytest.fixture
def recording_handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def mock_client(recording_handler: RecordingHandler) -> Generator[httpx.Client, None, None]:
    """A caller-owned client backed by the recording handler."""
    client = httpx.Client(transport=httpx.MockTransport(recording_handler))
    yield client
    client.close()


@pytest.fixture
def patched_client_factory(
    monkeypatch: pytest.MonkeyPatch, recording_handler: RecordingHandler
) -> List[httpx.Client]:
    """Route clients created inside restify through the recording handler.

    Returns the list of clients created, so tests can check they were closed.
    """
    created: List[httpx.Client] = []

    def factory(*args, **kwargs) -> httpx.Client:
        kwargs.setdefault("transport", httpx.MockTransport(recording_handler))
        client = REAL_HTTPX_CLIENT(*args, **kwargs)
        created.append(client)
        return client

    monkeypatch.setattr(httpx, "Client", factory)
    return created


@pytest.fixture
def forbid_http(monkeypatch: pytest.MonkeyPatch) -> Callable[[], None]:
    """Fail the test if restify tries to create an HTTP client."""

    def factory(*args, **kwargs):
        raise AssertionError("an HTTP client was created")

    monkeypatch.setattr(httpx, "Client", factory)
    return factory


@pytest.fixture
def make_handler() -> Callable[..., RecordingHandler]:
    """Build a recording handler with a custom body, status or headers."""
    return RecordingHandler
