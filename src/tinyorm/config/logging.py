"""Logging setup for the tinyorm package logger."""

from __future__ import annotations

import logging

from tinyorm.config.settings import settings

LOG_FORMAT = "%(levelname)s: %(message)s"
PACKAGE_LOGGER = "tinyorm"


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach a stream handler to the ``tinyorm`` logger.

    ``level`` defaults to ``settings.log_level``.  Calling the function
    again only updates the level, it never stacks handlers.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level if level is not None else settings.log_level.upper())

    has_stream = any(
        type(handler) is logging.StreamHandler for handler in logger.handlers
    )
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
