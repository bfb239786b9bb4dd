"""
Store Configuration
====================

Pydantic configuration for the file session store.
Set once at construction; never mutated afterwards.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_SESSION_DIR = PACKAGE_DIR / "sessions"


class StoreConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    session_directory: Path = Field(default=DEFAULT_SESSION_DIR, alias="sessionDirectory")
    atomic_writes: bool = True

    @field_validator("session_directory")
    @classmethod
    def _expand(cls, value: Path) -> Path:
        return value.expanduser()

    @classmethod
    def from_options(
        cls,
        options: StoreConfig | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> StoreConfig:
        """Build a config from an existing config, an options mapping, or keywords."""
        if isinstance(options, StoreConfig):
            if not overrides:
                return options
            data = options.model_dump()
        else:
            data = dict(options or {})
        data.update(overrides)
        config = cls.model_validate(data)
        logger.debug("Session directory: %s", config.session_directory)
        return config
