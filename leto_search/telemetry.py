"""Structured logging for index builds, corpus loads and searches.

Each event is one JSON line: timestamp, level, event name and the event's
fields. Fields travel on the record as a single ``fields`` mapping.
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from typing import Any

from .config import LOG_LEVEL

LOGGER_NAME = "leto_search"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "event": getattr(record, "event", record.getMessage()),
        }
        payload.update(getattr(record, "fields", {}))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: int = LOG_LEVEL) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.setLevel(level)
    logger.addHandler(handler)
    return logger


def log_event(logger: logging.Logger, event: str, **fields: Any) -> None:
    logger.info(event, extra={"event": event, "fields": fields})


class BuildTimer:
    """Logs index_build_start on creation and index_build_complete with elapsed_ms on finish."""

    def __init__(self, logger: logging.Logger, **fields: Any) -> None:
        self._logger = logger
        self._fields = fields
        self._start = time.perf_counter()
        log_event(logger, "index_build_start", **fields)

    def finish(self, **fields: Any) -> float:
        elapsed_ms = round((time.perf_counter() - self._start) * 1000, 3)
        log_event(
            self._logger,
            "index_build_complete",
            **self._fields,
            **fields,
            elapsed_ms=elapsed_ms,
        )
        return elapsed_ms
