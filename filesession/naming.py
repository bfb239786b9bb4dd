"""
Session Filenames
==================

Maps a session id and TTL to the on-disk name ``<hex(id)>__<ttl_ms>.json``
and back. The hex fragment is the identity; the TTL is kept in the name
because freshness is judged from the file's mtime plus this value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from filesession.errors import InvalidTTLError

SEPARATOR = "__"
SUFFIX = ".json"

_FILENAME_RE = re.compile(r"^(?P<fragment>(?:[0-9a-f]{2})*)__(?P<ttl>0|[1-9][0-9]*)\.json$")

SessionId = bytes | str


@dataclass(frozen=True)
class SessionFilename:
    """A parsed session filename."""
    fragment: str
    ttl_ms: int

    @property
    def session_id(self) -> bytes:
        return decode(self.fragment)

    def __str__(self) -> str:
        return f"{self.fragment}{SEPARATOR}{self.ttl_ms}{SUFFIX}"


def _to_bytes(session_id: SessionId) -> bytes:
    if isinstance(session_id, str):
        return session_id.encode("utf-8")
    if isinstance(session_id, (bytes, bytearray, memoryview)):
        return bytes(session_id)
    raise TypeError(
        f"session id must be bytes or str, not {type(session_id).__name__}"
    )


def encode(session_id: SessionId) -> str:
    """Lowercase hex of the id bytes. Distinct ids never share a fragment."""
    return _to_bytes(session_id).hex()


def decode(fragment: str) -> bytes:
    return bytes.fromhex(fragment)


def validate_ttl(ttl_ms: object) -> int:
    """Return ttl_ms unchanged if it is a non-negative int, else raise."""
    # bool is an int subclass but never a meaningful TTL
    if isinstance(ttl_ms, bool) or not isinstance(ttl_ms, int) or ttl_ms < 0:
        raise InvalidTTLError(
            f"TTL must be a non-negative integer of milliseconds, got {ttl_ms!r}"
        )
    return ttl_ms


def build_filename(session_id: SessionId, ttl_ms: int) -> str:
    ttl_ms = validate_ttl(ttl_ms)
    return f"{encode(session_id)}{SEPARATOR}{ttl_ms}{SUFFIX}"


def match_pattern(session_id: SessionId) -> str:
    """Glob matching every file for this id, whatever TTL it was stored with."""
    return f"{encode(session_id)}{SEPARATOR}*{SUFFIX}"


def parse_filename(name: str) -> SessionFilename | None:
    """Split a filename into fragment and TTL.

    Returns None for names that match the glob but were not written by
    the store (e.g. ``<hex>__tmp.json``).
    """
    m = _FILENAME_RE.match(name)
    if m is None:
        return None
    return SessionFilename(fragment=m.group("fragment"), ttl_ms=int(m.group("ttl")))
