"""
Unit tests for the exception hierarchy.
"""

import pytest

from restify.errors import OpenError, ParseError, RequestBuildError, RequestError, RestifyError, TransportError


class TestErrorHierarchy:
    """Inheritance and wrapping."""

    @pytest.mark.parametrize("error_class", [ParseError, OpenError, RequestError, RequestBuildError, TransportError])
    def test_all_errors_are_restify_errors(self, error_class):
        assert issubclass(error_class, RestifyError)

    def test_request_errors_share_a_base(self):
        assert issubclass(RequestBuildError, RequestError)
        assert issubclass(TransportError, RequestError)
        assert not issubclass(OpenError, RequestError)
        assert not issubclass(ParseError, RequestError)


class TestErrorMessages:
    """Message prefixes and attributes."""

    @pytest.mark.parametrize(
        "error, expected",
        [
            (ParseError("buffer", ValueError("bad")), "Failed to parse buffer: bad"),
            (ParseError("reader", ValueError("bad"), what="reader"), "Failed to parse reader: bad"),
            (ParseError("/tmp/x.html", ValueError("bad"), what="file"), "Failed to parse file: bad"),
            (ParseError("https://a", ValueError("bad"), what="response body"), "Failed to parse response body: bad"),
            (OpenError("/tmp/x.html", FileNotFoundError("gone")), "Failed to open file: gone"),
            (RequestBuildError("https://a", ValueError("bad url")), "Failed to request: bad url"),
            (TransportError("https://a", OSError("refused")), "Failed to retrieve response: refused"),
        ],
    )
    def test_prefixes(self, error, expected):
        assert str(error) == expected

    def test_source_and_cause(self):
        cause = FileNotFoundError("gone")
        error = OpenError("/tmp/x.html", cause)

        assert error.source == "/tmp/x.html"
        assert error.cause is cause

    def test_without_cause(self):
        error = TransportError("https://a")

        assert error.cause is None
        assert str(error) == "Failed to retrieve response: "
