"""Logging setup for the fsnav command line and embedding hosts."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(level_name: str | None) -> int:
    """Map a level name like ``"debug"`` to a logging level, defaulting to WARNING."""
    name = str(level_name or "WARNING").upper().strip()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level_name: str | None = "WARNING", log_file: Path | None = None) -> int:
    """Configure root logging to stderr and optionally a rotating file.

    Safe to call repeatedly: root handlers are replaced, not duplicated.
    Returns the effective level.
    """
    level = resolve_level(level_name)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = []
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=os.fspath(log_file),
            maxBytes=256 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        root.addHandler(handler)

    logging.getLogger("fsnav").debug("fsnav logging enabled (level=%s, file=%s)", logging.getLevelName(level), log_file)
    return level


__all__ = [
    "LOG_FORMAT",
    "resolve_level",
    "setup_logging",
]
