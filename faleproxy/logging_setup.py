"""Logging configuration helpers for the Faleproxy service."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def _normalise_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        value = level.strip().upper()
        if value.isdigit():
            return int(value)
        resolved = logging.getLevelName(value)
        if isinstance(resolved, int):
            return resolved
    return logging.INFO


def configure_logging(level: str | int | None = None, log_file: str | Path | None = None) -> Path | None:
    """Configure root logging to stream to the console and, optionally, a file.

    The log file (when given) is truncated on every call so that each run
    starts with a clean slate.  Returns the file path, or ``None`` when only
    console output is configured.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_path: Path | None = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, mode="w", encoding="utf-8"))

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(level=_normalise_level(level), format=LOG_FORMAT, handlers=handlers)
    logging.getLogger(__name__).debug("Logging initialised (file=%s)", log_path)
    return log_path
