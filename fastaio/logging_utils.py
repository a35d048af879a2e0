"""Logging helpers for the fastaio command line."""

from __future__ import annotations

import logging
from typing import Optional

LOGGER_NAME = "fastaio"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the root handler and return the package logger.

    ``quiet`` wins over ``verbose`` and keeps only warnings and errors.
    """

    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(module: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or its child for ``module``."""

    if module:
        return logging.getLogger(f"{LOGGER_NAME}.{module}")
    return logging.getLogger(LOGGER_NAME)
