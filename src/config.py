"""Settings loaded from environment variables.

One Settings object per invocation; command-line flags override it in cli.py.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "TAZU"
DEFAULT_TASKS_FILE = Path.home() / '.tazu' / 'tasks.json'


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


def _env_level(name: str, default: int) -> int:
    """Parse a level name (DEBUG, info, ...) or number; bad values -> default."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    tasks_file: Path
    log_level: int = logging.WARNING
    log_file: Optional[Path] = None


def get_settings() -> Settings:
    return Settings(
        tasks_file=_env_path(_k("FILE"), DEFAULT_TASKS_FILE) or DEFAULT_TASKS_FILE,
        log_level=_env_level(_k("LOG_LEVEL"), logging.WARNING),
        log_file=_env_path(_k("LOG_FILE"), None),
    )
