"""Logging setup for interactive sessions.

The engine owns the terminal in raw mode, so log records never go to the
console. ``configure_logging`` routes the ``geeto`` logger to a file instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "geeto"
LOG_FILENAME = "geeto.log"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def default_log_path() -> Path:
    """Return the per-user log file location."""
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(level: str | int = "WARNING", log_file: Path | None = None) -> Path | None:
    """Attach a file handler to the ``geeto`` logger.

    ``level`` accepts a level name or number. Returns the path being written,
    or ``None`` when the log directory cannot be created (logging then stays
    disabled rather than interrupting the session).
    """
    logger = logging.getLogger(APP_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    target = log_file if log_file is not None else default_log_path()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    except OSError:
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    for existing in list(logger.handlers):
        if isinstance(existing, logging.FileHandler):
            logger.removeHandler(existing)
            existing.close()
    logger.addHandler(handler)
    return target
