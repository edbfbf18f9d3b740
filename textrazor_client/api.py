"""
HTTP request layer for textrazor-client: one dispatch per remote call,
plus the logging and security helpers around it.
"""

import hashlib
import http.client
import json
import re
import sys
import time
import urllib.parse
import urllib.request
import uuid

from textrazor_client import config
from textrazor_client.exceptions import (
    APIError,
    BodyEncodingError,
    BodyReadError,
    DecodeError,
    HTTPStatusError,
    RequestBuildError,
    TransportError,
    URIError,
)
from textrazor_client.models import EmptyResponse, HTTPResponse
from textrazor_client.transport import status_of

# RFC 7230 token characters.
_METHOD_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")

_SECRET_QUERY_KEYS = frozenset({"apikey", "api_key", "key", "token"})


# ---------------------------------------------------------------------------
# Security helpers
# ---------------------------------------------------------------------------


def _mask_token(token):
    """Show only first 6 chars of a token for safe logging."""
    return token[:6] + "..." if len(token) > 6 else token


def _sanitize_url_for_log(url):
    """Mask sensitive query params in URLs before logging."""
    parsed = urllib.parse.urlsplit(url)
    if not parsed.query:
        return url
    pairs = urllib.parse.parse_qsl(parsed.query, keep_blank_values=True)
    masked = []
    for key, value in pairs:
        if key.lower() in _SECRET_QUERY_KEYS:
            masked.append((key, "***"))
        else:
            masked.append((key, value))
    safe_query = urllib.parse.urlencode(masked, doseq=True)
    return urllib.parse.urlunsplit(
        (parsed.scheme, parsed.netloc, parsed.path, safe_query, parsed.fragment)
    )


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not config.HTTP_LOG_ENABLED:
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _is_sampled_request(request_id):
    """Decide if a request should be logged based on sample rate."""
    rate = config.HTTP_LOG_SAMPLE_RATE
    if rate <= 0:
        return False
    if rate >= 1:
        return True
    if not request_id:
        return False
    digest = hashlib.sha256(request_id.encode("utf-8")).digest()
    bucket = int.from_bytes(digest[:4], "big") / 4294967295.0
    return bucket < rate


# ---------------------------------------------------------------------------
# Request building
# ---------------------------------------------------------------------------


def default_headers(content_type):
    """Headers for a request whose body has *content_type*."""
    return {"Content-Type": content_type}


def _build_url(client, path):
    base = client.secure_endpoint if client.use_encryption else client.endpoint
    url = base + path
    try:
        parsed = urllib.parse.urlsplit(url)
    except ValueError as e:
        raise URIError(f"[ERROR] URI parsing failed '{url}': {e}") from e
    if not parsed.scheme or not parsed.netloc:
        raise URIError(f"[ERROR] URI parsing failed '{url}': not an absolute URL")
    return url


def _encode_body(body):
    if body is None:
        return ""
    try:
        return body.encode()
    except Exception as e:
        raise BodyEncodingError(f"[ERROR] Body request encoding failed: {e}") from e


def _build_request(url, method, payload, headers, api_key):
    if not isinstance(method, str) or not _METHOD_RE.match(method):
        raise RequestBuildError(f"[ERROR] HTTP request creation failed: invalid method {method!r}")
    data = payload.encode("utf-8") if payload else None
    try:
        req = urllib.request.Request(url, data=data, method=method)
    except ValueError as e:
        raise RequestBuildError(f"[ERROR] HTTP request creation failed: {e}") from e
    for name, value in (headers or {}).items():
        req.add_header(name, value)
    # Added last so caller headers can never replace the key.
    req.add_header(config.API_KEY_HEADER, api_key)
    return req


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def _read_body(resp):
    limit = config.HTTP_MAX_RESPONSE_BYTES
    try:
        raw = resp.read(limit + 1)
    except (OSError, http.client.HTTPException) as e:
        raise BodyReadError(f"[ERROR] HTTP response body read failed: {e}") from e
    if raw is None:
        raw = b""
    if len(raw) > limit:
        raise BodyReadError(f"[ERROR] Response too large from TextRazor API (>{limit} bytes).")
    return raw


def dispatch(client, path, method, headers=None, body=None, response=None):
    """Run one request/response exchange against the TextRazor API.

    *response* is the empty result record to populate; it is bound to the
    returned ``HTTPResponse`` before the status and envelope are checked, so
    diagnostics survive a failure. Raises a ``TextRazorError`` subclass
    naming the stage that failed.
    """
    if response is None:
        response = EmptyResponse()

    url = _build_url(client, path)
    payload = _encode_body(body)
    req = _build_request(url, method, payload, headers, client.api_key)

    request_id = str(uuid.uuid4())
    safe_url = _sanitize_url_for_log(url)
    sampled = _is_sampled_request(request_id)
    start = time.perf_counter()
    if sampled:
        _log_http_event(
            phase="request",
            method=method,
            url=safe_url,
            request_id=request_id,
            api_key=_mask_token(client.api_key),
            bytes=len(payload),
        )

    try:
        if client.timeout is None:
            resp = client.transport.open(req)
        else:
            resp = client.transport.open(req, timeout=client.timeout)
    except (OSError, http.client.HTTPException) as e:
        if sampled:
            _log_http_event(
                phase="network_error",
                method=method,
                url=safe_url,
                error=str(e),
                request_id=request_id,
            )
        raise TransportError(f"[ERROR] HTTP request execution failed: {e}") from e

    try:
        raw = _read_body(resp)
        status = status_of(resp)
        resp_headers = resp.headers
    finally:
        resp.close()

    if sampled:
        _log_http_event(
            phase="response",
            method=method,
            url=safe_url,
            status=status,
            bytes=len(raw),
            latency_ms=round((time.perf_counter() - start) * 1000, 2),
            request_id=request_id,
        )

    http_response = HTTPResponse(status=status, headers=resp_headers, body=raw, response=response)
    response.set_http_response(http_response)

    if status != 200:
        raise HTTPStatusError(
            status,
            reason=getattr(resp, "reason", "") or "",
            body=raw,
            headers=resp_headers,
            http_response=http_response,
        )

    try:
        http_response.parse_body()
    except (ValueError, TypeError) as e:
        raise DecodeError(
            f"[ERROR] HTTP response body parsing failed: {e}", http_response
        ) from e

    if not http_response.ok:
        detail = ": ".join(p for p in (http_response.error, http_response.message) if p)
        suffix = f" ({detail})" if detail else ""
        raise APIError(
            f"[ERROR] Unexpected 'ok' field value: {http_response.ok}{suffix}",
            error=http_response.error,
            remote_message=http_response.message,
            http_response=http_response,
        )

    return http_response
