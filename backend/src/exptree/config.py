"""Runtime configuration for the exptree tooling."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"


def _parse_level(name: str | None) -> str:
    if not name:
        return DEFAULT_LOG_LEVEL
    level = name.strip().upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level


@dataclass
class Settings:
    """Settings for the loader and the command-line tool.

    Attributes:
        log_level: Logging level name (DEBUG, INFO, WARNING, ...)
        search_paths: Directories prepended to the import path before
            resolving module:attribute references
    """

    log_level: str = DEFAULT_LOG_LEVEL
    search_paths: list[Path] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> Settings:
        """Create settings from environment variables.

        EXPTREE_LOG_LEVEL: level name, case-insensitive. Unknown names
            fall back to WARNING.
        EXPTREE_PATH: os.pathsep-separated list of directories.
        """
        raw_path = os.environ.get("EXPTREE_PATH", "")
        return cls(
            log_level=_parse_level(os.environ.get("EXPTREE_LOG_LEVEL")),
            search_paths=[Path(p) for p in raw_path.split(os.pathsep) if p],
        )

    def with_overrides(
        self,
        log_level: str | None = None,
        search_paths: list[Path] | None = None,
    ) -> Settings:
        """Return a copy with command-line values applied on top."""
        return Settings(
            log_level=_parse_level(log_level) if log_level else self.log_level,
            search_paths=list(search_paths or []) + self.search_paths,
        )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(level=_parse_level(level), format=LOG_FORMAT)
