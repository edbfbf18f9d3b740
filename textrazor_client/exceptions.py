"""
textrazor-client exception hierarchy.

All custom exceptions live here to avoid circular imports.
Each failing stage of a request raises its own class so callers can tell
exactly where an exchange broke down.
"""


class TextRazorError(Exception):
    """Base class for every error raised by textrazor-client."""


class SetupError(TextRazorError):
    """No API key configured."""


class ValidationError(TextRazorError):
    """A precondition failed before any network call."""


class URIError(TextRazorError):
    """Endpoint + path is not a valid absolute URL."""


class BodyEncodingError(TextRazorError):
    """The request body could not be encoded."""


class RequestBuildError(TextRazorError):
    """The outgoing request could not be constructed (e.g. bad method)."""


class TransportError(TextRazorError):
    """The transport failed to execute the request (connection, DNS, I/O)."""


class BodyReadError(TextRazorError):
    """The response body could not be read in full."""


class ResponseError(TextRazorError):
    """A response was received but rejected.

    ``http_response`` keeps the status, headers and raw body for diagnostics.
    """

    def __init__(self, message, http_response=None):
        super().__init__(message)
        self.http_response = http_response


class HTTPStatusError(ResponseError):
    """The service answered with a non-200 status code."""

    def __init__(self, code, reason="", body=b"", headers=None, http_response=None):
        super().__init__(f"[ERROR] Unexpected status code: {code}", http_response)
        self.code = code
        self.reason = reason
        self.body = body
        self.headers = headers or {}


class DecodeError(ResponseError):
    """The response body is not a valid JSON envelope."""


class APIError(ResponseError):
    """The envelope decoded fine but its 'ok' field is false."""

    def __init__(self, message, error="", remote_message="", http_response=None):
        super().__init__(message, http_response)
        self.error = error
        self.remote_message = remote_message
