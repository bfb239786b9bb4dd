"""
Shared pytest fixtures for filesession tests.

- session_dir: an existing, empty session directory under tmp_path
- store: a FileStore rooted at session_dir
- age_file: push a file's mtime into the past
"""

import os
import time
from pathlib import Path

import pytest

from filesession import FileStore


@pytest.fixture
def session_dir(tmp_path: Path) -> Path:
    path = tmp_path / "sessions"
    path.mkdir()
    return path


@pytest.fixture
def store(session_dir: Path) -> FileStore:
    return FileStore(session_directory=session_dir)


@pytest.fixture
def age_file():
    """Set a file's mtime the given number of milliseconds in the past."""

    def _age(path: Path, millis: int) -> None:
        then = time.time() - millis / 1000
        os.utime(path, (then, then))

    return _age
