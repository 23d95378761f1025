"""
utils/loggers.py

Purpose
-------
Application loggers.

- get_logger(name) -> plain stream logger used by controllers and helpers
- get_api_logger() -> JSON-lines logger for REST traffic (logs/api.log)
- log_event(logger, op, phase, message, extra) -> structured event line
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from .. import config

__all__ = ["get_logger", "get_api_logger", "log_event"]

_API_LOGGER_NAME = "branchpos.api"


def _level() -> int:
    return getattr(logging, config.LOG_LEVEL, logging.INFO)


def get_logger(name="branchpos"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(_level())
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(ch)
    return logger


class _JsonLineFormatter(logging.Formatter):
    """
    Minimal JSON-lines formatter:
      {"ts":"2025-09-16T12:00:01.123Z","level":"INFO","name":"branchpos.api","msg":"...","extra":{...}}
    """
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        ts = datetime.now(timezone.utc).replace(tzinfo=None)
        payload = {
            "ts": ts.isoformat(timespec="milliseconds") + "Z",
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "extra_payload") and isinstance(record.extra_payload, dict):
            payload["extra"] = record.extra_payload
        return json.dumps(payload, ensure_ascii=False, default=str)


def get_api_logger(file_path: Optional[str] = None) -> logging.Logger:
    """
    Return the REST traffic logger. Writes JSON-lines to LOG_DIR/api.log and
    mirrors warnings to stderr. Reuses the same handlers across calls.
    """
    logger = logging.getLogger(_API_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(_level())
    logger.propagate = False

    log_file = Path(file_path) if file_path else config.LOG_DIR / "api.log"
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), mode="a", encoding="utf-8", delay=True)
    except OSError:
        fh = None

    if fh is not None:
        fh.setFormatter(_JsonLineFormatter())
        logger.addHandler(fh)

    sh = logging.StreamHandler()
    sh.setLevel(logging.WARNING if fh is not None else _level())
    sh.setFormatter(_JsonLineFormatter())
    logger.addHandler(sh)
    return logger


def log_event(
    logger: logging.Logger,
    op: str,
    phase: str,
    message: str,
    extra: Dict[str, object] | None = None,
    level: int = logging.INFO,
) -> None:
    """
    Log a structured event line.

    Args:
        logger: Usually get_api_logger().
        op: Operation name, e.g. "GET /sales/branch/1".
        phase: "request", "response" or "error".
        message: Human-readable short message.
        extra: Additional key/values (status, duration, branch id...).
        level: Logging level (default INFO).
    """
    extra_payload: Dict[str, object] = {"op": op, "phase": phase}
    if extra:
        for k, v in extra.items():
            if k not in extra_payload:
                extra_payload[k] = v
    logger.log(level, message, extra={"extra_payload": extra_payload})
