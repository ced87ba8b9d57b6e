"""Configuration for leto_search (env-overridable)."""

from __future__ import annotations

import logging
import os
from pathlib import Path


def _env_path(key: str, default: Path) -> Path:
    return Path(os.getenv(key, str(default))).expanduser()


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


def _env_log_level(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


CORPUS_PATH = _env_path("LETO_CORPUS_PATH", Path("data.json"))

DEFAULT_RESULT_LIMIT = _env_int("LETO_RESULT_LIMIT", 10)
MAX_WORKERS = _env_int("LETO_MAX_WORKERS", 8)

LOG_LEVEL = _env_log_level("LETO_LOG_LEVEL", logging.INFO)
