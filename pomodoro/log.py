"""Logging setup: stderr plus a rotating file in the user log directory."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "Pomodoro"
_LOG_FILE = "pomodoro.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S"

_configured: bool = False


def configure_logging(level: str | int = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Attach handlers to the ``pomodoro`` logger.  Safe to call twice.

    An unknown level name falls back to INFO with a warning.
    """
    global _configured
    logger = logging.getLogger("pomodoro")
    bad_level = False
    try:
        logger.setLevel(level if isinstance(level, int) else str(level).upper())
    except (TypeError, ValueError):
        logger.setLevel(logging.INFO)
        bad_level = True

    if not _configured:
        _attach_handlers(logger, log_dir)
        _configured = True

    if bad_level:
        logger.warning("Unknown log level %r, using INFO", level)
    return logger


def _attach_handlers(logger: logging.Logger, log_dir: Path | None) -> None:
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    log_dir = log_dir or Path(user_log_dir(_APP_NAME))
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_dir / _LOG_FILE,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        logger.warning("File logging disabled: %s", e)
    else:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False
