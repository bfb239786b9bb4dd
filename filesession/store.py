"""
File Session Store
===================

Filesystem-backed session persistence.
Each session is one JSON file named ``<hex(id)>__<ttl_ms>.json``.
Expiry is checked lazily on read against the file's mtime; there is no
sweeper and no locking. Every call is stateless apart from the configured
directory, so one instance can be shared by concurrent callers.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from pathlib import Path
from typing import Any, Callable, Mapping

import aiofiles
import aiofiles.os

from filesession.config import StoreConfig
from filesession.errors import (
    DeserializationError,
    FilesystemError,
    ReadError,
    SerializationError,
)
from filesession.lister import DirectoryLister
from filesession.naming import (
    SessionFilename,
    SessionId,
    build_filename,
    match_pattern,
    parse_filename,
)

logger = logging.getLogger(__name__)


class FileStore:
    """Session store keeping one JSON file per session in a directory."""

    def __init__(
        self,
        options: StoreConfig | Mapping[str, Any] | None = None,
        *,
        lister: DirectoryLister | None = None,
        clock: Callable[[], float] = time.time,
        **overrides: Any,
    ):
        self.config = StoreConfig.from_options(options, **overrides)
        self.lister = lister or DirectoryLister()
        self._clock = clock

    @property
    def directory(self) -> Path:
        return self.config.session_directory

    def path_for(self, name: str) -> Path:
        return self.directory / name

    async def ensure_directory(self) -> Path:
        """Create the session directory if it is missing. Never done implicitly."""
        try:
            await aiofiles.os.makedirs(self.directory, exist_ok=True)
        except OSError as e:
            raise FilesystemError(
                "Cannot create session directory", path=self.directory, cause=e
            ) from e
        return self.directory

    # ── Store ────────────────────────────────────────────────────────────

    async def set(self, session_id: SessionId, payload: Any, ttl_ms: int) -> None:
        """Write the payload for a session, replacing a file with the same TTL.

        Files for the same id stored with a different TTL are left in place.
        """
        name = build_filename(session_id, ttl_ms)
        text = self._serialize(payload)
        path = self.path_for(name)

        if self.config.atomic_writes:
            await self._write_atomic(path, text)
        else:
            await self._write(path, text)
        logger.debug("Stored session %s (%d bytes)", name, len(text))

    @staticmethod
    def _serialize(payload: Any) -> str:
        try:
            return json.dumps(payload, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError("Session payload is not JSON serializable", cause=e) from e

    async def _write(self, path: Path, text: str) -> None:
        try:
            async with aiofiles.open(path, "w", encoding="utf-8") as f:
                await f.write(text)
        except OSError as e:
            raise FilesystemError("Cannot write session file", path=path, cause=e) from e

    async def _write_atomic(self, path: Path, text: str) -> None:
        # Leading dot keeps the temp file out of every id's glob; fixed length
        tmp = path.with_name(f".{uuid.uuid4().hex}.tmp")
        try:
            await self._write(tmp, text)
        except FilesystemError:
            await self._discard(tmp, kind="temporary file")
            raise
        try:
            await aiofiles.os.replace(tmp, path)
        except OSError as e:
            await self._discard(tmp, kind="temporary file")
            raise FilesystemError("Cannot write session file", path=path, cause=e) from e

    # ── Fetch ────────────────────────────────────────────────────────────

    async def get(self, session_id: SessionId) -> Any | None:
        """Return the stored payload, or None if there is no live session.

        An expired file is removed on the way out.
        """
        matches = await self._find(session_id)
        if not matches:
            return None

        entry = matches[0]
        path = self.path_for(str(entry))

        if await self._is_expired(path, entry.ttl_ms):
            logger.debug("Session %s expired", entry)
            await self._discard(path)
            return None

        return await self._read(path)

    async def _is_expired(self, path: Path, ttl_ms: int) -> bool:
        try:
            st = await aiofiles.os.stat(path)
        except FileNotFoundError as e:
            raise ReadError("Session file vanished before it was read", path=path, cause=e) from e
        except OSError as e:
            raise FilesystemError("Cannot stat session file", path=path, cause=e) from e

        age_ms = self._clock() * 1000 - st.st_mtime_ns / 1_000_000
        return age_ms > ttl_ms

    async def _read(self, path: Path) -> Any:
        try:
            async with aiofiles.open(path, "r", encoding="utf-8") as f:
                text = await f.read()
        except FileNotFoundError as e:
            raise ReadError("Session file vanished before it was read", path=path, cause=e) from e
        except UnicodeDecodeError as e:
            raise DeserializationError("Session file is not valid UTF-8", path=path, cause=e) from e
        except OSError as e:
            raise FilesystemError("Cannot read session file", path=path, cause=e) from e

        try:
            return json.loads(text)
        except ValueError as e:
            raise DeserializationError("Session file is not valid JSON", path=path, cause=e) from e

    # ── Destroy ──────────────────────────────────────────────────────────

    async def destroy(self, session_id: SessionId) -> None:
        """Delete every file stored for the session. Missing files are fine."""
        for entry in await self._find(session_id):
            await self._remove(self.path_for(str(entry)))

    # ── Helpers ──────────────────────────────────────────────────────────

    async def _find(self, session_id: SessionId) -> list[SessionFilename]:
        pattern = match_pattern(session_id)
        try:
            names = await self.lister.list(self.directory, pattern)
        except OSError as e:
            raise FilesystemError(
                "Cannot list session directory", path=self.directory, cause=e
            ) from e

        entries = []
        for name in names:
            entry = parse_filename(name)
            if entry is None:
                logger.debug("Ignoring unrecognised file %s", name)
                continue
            entries.append(entry)
        return entries

    async def _remove(self, path: Path) -> None:
        """Strict delete for explicit destroy; failures propagate."""
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            logger.debug("Session file %s already gone", path)
            return
        except OSError as e:
            raise FilesystemError("Cannot delete session file", path=path, cause=e) from e
        logger.debug("Deleted session file %s", path)

    async def _discard(self, path: Path, *, kind: str = "stale session file") -> None:
        """Best-effort delete for cleanup; failures are logged, never raised."""
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            return
        except OSError as e:
            logger.warning("Could not remove %s %s: %s", kind, path, e)
            return
        logger.debug("Removed %s %s", kind, path)
