"""Tests for the exception hierarchy and package re-exports."""

import pytest

from textrazor_client.exceptions import (
    APIError,
    BodyEncodingError,
    BodyReadError,
    DecodeError,
    HTTPStatusError,
    RequestBuildError,
    ResponseError,
    SetupError,
    TextRazorError,
    TransportError,
    URIError,
    ValidationError,
)

_ALL_KINDS = [
    SetupError,
    ValidationError,
    URIError,
    BodyEncodingError,
    RequestBuildError,
    TransportError,
    BodyReadError,
    HTTPStatusError,
    DecodeError,
    APIError,
]


class TestExceptionHierarchy:
    @pytest.mark.parametrize("kind", _ALL_KINDS)
    def test_all_are_textrazor_errors(self, kind):
        assert issubclass(kind, TextRazorError)

    def test_kinds_do_not_overlap(self):
        for kind in _ALL_KINDS:
            for other in _ALL_KINDS:
                if kind is not other:
                    assert not issubclass(kind, other)

    @pytest.mark.parametrize("kind", [HTTPStatusError, DecodeError, APIError])
    def test_response_errors(self, kind):
        assert issubclass(kind, ResponseError)


class TestErrorAttrs:
    def test_http_status_error_attrs(self):
        err = HTTPStatusError(404, "Not Found", b"body text", {"X-Req": "abc"})
        assert err.code == 404
        assert err.reason == "Not Found"
        assert err.body == b"body text"
        assert err.headers == {"X-Req": "abc"}
        assert err.http_response is None
        assert "404" in str(err)

    def test_http_status_error_default_headers(self):
        assert HTTPStatusError(500).headers == {}

    def test_api_error_attrs(self):
        err = APIError("failed", error="E", remote_message="M")
        assert err.error == "E"
        assert err.remote_message == "M"
        assert str(err) == "failed"


class TestPackageExports:
    def test_init_re_exports(self):
        import textrazor_client

        assert textrazor_client.TextRazorError is TextRazorError
        assert textrazor_client.APIError is APIError
        assert textrazor_client.TextRazorClient.__name__ == "TextRazorClient"
        assert textrazor_client.VERSION
