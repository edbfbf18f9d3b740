"""
Request parameters and encodable request bodies.
"""

from __future__ import annotations

import urllib.parse
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Protocol, runtime_checkable


@runtime_checkable
class RequestBody(Protocol):
    """Anything that can render itself to a request payload string."""

    def encode(self) -> str: ...


def _as_text(value):
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


class Params:
    """Ordered multi-valued parameter map, form-encoded on the wire.

    Keys are unique; each key holds its values in insertion order.
    ``encode()`` emits keys in sorted order so the output is deterministic.
    """

    def __init__(self, initial: Mapping[str, str | Iterable[str]] | None = None):
        self._values: dict[str, list[str]] = {}
        for key, value in (initial or {}).items():
            if isinstance(value, (str, bytes, int, float)):
                self.add(key, value)
            else:
                for item in value:
                    self.add(key, item)

    def add(self, key, value):
        """Append *value* under *key*, keeping prior values."""
        self._values.setdefault(key, []).append(_as_text(value))

    def set(self, key, value):
        """Replace every value under *key* with *value*."""
        self._values[key] = [_as_text(value)]

    def get(self, key):
        """Return the first value under *key*, or "" if absent."""
        values = self._values.get(key)
        if not values:
            return ""
        return values[0]

    def delete(self, key):
        """Remove *key* and all of its values."""
        self._values.pop(key, None)

    def encode(self) -> str:
        pairs = [(key, value) for key in sorted(self._values) for value in self._values[key]]
        return urllib.parse.urlencode(pairs)

    def __getitem__(self, key) -> list[str]:
        return self._values[key]

    def __delitem__(self, key):
        del self._values[key]

    def __contains__(self, key) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other):
        if not isinstance(other, Params):
            return NotImplemented
        return self._values == other._values

    def __repr__(self):
        return f"Params({self._values!r})"


@dataclass(frozen=True)
class RawBody:
    """Pre-built JSON or CSV payload, sent verbatim."""

    body: str

    def encode(self) -> str:
        return self.body
