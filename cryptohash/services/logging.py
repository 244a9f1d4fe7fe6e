"""
Handler setup for the ``cryptohash`` logger.

Library code logs through ``logging.getLogger("cryptohash")`` and never
configures it. The CLI calls configure_logging() once per invocation with the
values from the ``[logging]`` config section.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "cryptohash"
LOG_FILE_PATH = Path.home() / ".cryptohash" / "cryptohash.log"
MAX_FILE_SIZE = 10 * 1024 * 1024
BACKUP_COUNT = 3

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(
    level: str = "warning",
    console: bool = False,
    file: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """
    Attach stderr and/or rotating file handlers to the ``cryptohash`` logger.

    Handlers from an earlier call are closed first, so repeated calls do not
    duplicate output. With neither output enabled only the package's
    NullHandler remains and records are dropped.
    """
    logger = logging.getLogger(LOGGER_NAME)
    reset_logging()

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logger.setLevel(numeric)

    formatter = logging.Formatter(_FORMAT, datefmt="%H:%M:%S")
    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if file:
        path = log_file or LOG_FILE_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(path, maxBytes=MAX_FILE_SIZE, backupCount=BACKUP_COUNT))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if handlers:
        logger.propagate = False
    return logger


def reset_logging() -> None:
    """Close handlers added by configure_logging() and restore propagation."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
