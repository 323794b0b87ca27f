"""Application-wide logging configuration."""

from __future__ import annotations

import logging
import sys

_LOGGER_INITIALIZED = False

LOGGER_NAME = "between"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DEFAULT_LOG_LEVEL = logging.WARNING


def configure_logging(level: int | str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Configure the shared application logger and return it."""
    global _LOGGER_INITIALIZED
    logger = logging.getLogger(LOGGER_NAME)
    if _LOGGER_INITIALIZED:
        logger.setLevel(level)
        return logger

    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    logging.captureWarnings(True)

    _LOGGER_INITIALIZED = True
    logger.debug("Logging initialized at level %s", logging.getLevelName(logger.level))
    return logger
