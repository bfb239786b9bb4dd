"""
Store Errors
=============

Every failure raised by the file session store derives from
SessionStoreError and carries the path involved (if any) and the
underlying cause.
"""

from __future__ import annotations

from pathlib import Path


class SessionStoreError(Exception):
    """Base class for file session store failures."""

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.cause = cause

    def __str__(self) -> str:
        text = super().__str__()
        if self.path is not None:
            text = f"{text} [{self.path}]"
        if self.cause is not None:
            text = f"{text}: {self.cause}"
        return text


class InvalidTTLError(SessionStoreError, ValueError):
    """TTL is not a non-negative integer number of milliseconds."""


class SerializationError(SessionStoreError):
    """Payload could not be converted to JSON text."""


class DeserializationError(SessionStoreError):
    """Session file content is not valid JSON."""


class FilesystemError(SessionStoreError):
    """A list, stat, read, write or delete call failed."""


class ReadError(FilesystemError):
    """Session file vanished between listing and reading it."""
