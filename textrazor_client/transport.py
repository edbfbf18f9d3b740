"""
Default HTTP transport over urllib.

A transport is any object with ``open(request, timeout=None)`` returning a
response that exposes ``status``, ``headers``, ``read(amt)`` and ``close()``.
``urllib.request.OpenerDirector`` already fits; ``UrllibTransport`` adds
gzip negotiation and hands non-2xx answers back as ordinary responses so
the dispatcher can validate the status itself.
"""

from __future__ import annotations

import urllib.error
import urllib.request
import zlib


_CHUNK_SIZE = 64 * 1024


class GzipResponse:
    """Response wrapper that gunzips the body on read.

    Decompression is incremental: ``read(amt)`` produces at most *amt*
    bytes, so a size cap on the decoded body also bounds memory.
    """

    def __init__(self, raw):
        self._raw = raw
        self.status = status_of(raw)
        self.headers = raw.headers
        self._decoder = zlib.decompressobj(16 + zlib.MAX_WBITS)
        self._pending = b""

    def read(self, amt=None):
        unbounded = amt is None or amt < 0
        out = bytearray(self._pending)
        try:
            while not self._decoder.eof and (unbounded or len(out) < amt):
                chunk = self._decoder.unconsumed_tail or self._raw.read(_CHUNK_SIZE)
                if chunk:
                    room = 0 if unbounded else amt - len(out)
                    out += self._decoder.decompress(chunk, room)
                    continue
                out += self._decoder.flush()
                if not self._decoder.eof:
                    raise OSError("truncated gzip response body")
        except zlib.error as e:
            raise OSError(f"corrupt gzip response body: {e}") from e
        if unbounded:
            self._pending = b""
            return bytes(out)
        self._pending = bytes(out[amt:])
        return bytes(out[:amt])

    def close(self):
        self._raw.close()


def status_of(resp):
    """HTTP status of a urllib-style response."""
    status = getattr(resp, "status", None)
    if status is None:
        status = resp.getcode()
    return status


class UrllibTransport:
    """Transport backed by a ``urllib.request`` opener."""

    def __init__(self, use_compression=True, opener=None):
        self.use_compression = use_compression
        self._opener = opener or urllib.request.build_opener()

    def open(self, request, timeout=None):
        if self.use_compression:
            request.add_header("Accept-encoding", "gzip")
        try:
            if timeout is None:
                resp = self._opener.open(request)
            else:
                resp = self._opener.open(request, timeout=timeout)
        except urllib.error.HTTPError as e:
            # An HTTP error status is still a response; the body stays readable.
            resp = e
        if self.use_compression and (resp.headers.get("Content-Encoding") or "").lower() == "gzip":
            return GzipResponse(resp)
        return resp


def default_transport(use_compression=True):
    """Build the transport used when the caller does not supply one."""
    return UrllibTransport(use_compression=use_compression)
