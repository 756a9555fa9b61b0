"""Logging setup for the explorer process.

Modules log through ``logging.getLogger(__name__)``; this module only wires
handlers onto the package logger. Passwords are never passed to a logger.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

PACKAGE_LOGGER = "defira"
LOG_FILENAME = "defira.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_MAX_BYTES = 2_000_000
LOG_BACKUP_COUNT = 3


def default_log_path() -> Path:
    return Path(user_log_dir("defira", appauthor=False)) / LOG_FILENAME


def configure_logging(level: str | int = logging.WARNING, log_path: Path | None = None) -> logging.Logger:
    """Attach one handler to the package logger and set its level.

    Logs go to a rotating file when ``log_path`` is given, otherwise to
    stderr. Calling again replaces the previously installed handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    for existing in list(logger.handlers):
        if getattr(existing, "_defira_handler", False):
            logger.removeHandler(existing)
            existing.close()

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._defira_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
