"""
Directory Lister
=================

Resolves a glob pattern to the matching file names in one directory.
"""

from __future__ import annotations

import fnmatch
import logging
from pathlib import Path

import aiofiles.os

logger = logging.getLogger(__name__)


class DirectoryLister:
    """Lists file names in a directory matching a glob pattern.

    Matching is case-sensitive and never descends into subdirectories.
    A directory that does not exist lists as empty. Names come back
    sorted, so the first match is stable between calls.
    """

    async def list(self, directory: str | Path, pattern: str) -> list[str]:
        try:
            names = await aiofiles.os.listdir(directory)
        except FileNotFoundError:
            logger.debug("Session directory %s does not exist", directory)
            return []
        matches = sorted(n for n in names if fnmatch.fnmatchcase(n, pattern))
        logger.debug("%d file(s) in %s match %s", len(matches), directory, pattern)
        return matches
