"""
File Session Store
===================

Filesystem-backed session persistence with TTL-in-filename expiry.
"""

from filesession.config import DEFAULT_SESSION_DIR, StoreConfig
from filesession.errors import (
    DeserializationError,
    FilesystemError,
    InvalidTTLError,
    ReadError,
    SerializationError,
    SessionStoreError,
)
from filesession.lister import DirectoryLister
from filesession.store import FileStore

__all__ = [
    "DEFAULT_SESSION_DIR",
    "DeserializationError",
    "DirectoryLister",
    "FileStore",
    "FilesystemError",
    "InvalidTTLError",
    "ReadError",
    "SerializationError",
    "SessionStoreError",
    "StoreConfig",
]
