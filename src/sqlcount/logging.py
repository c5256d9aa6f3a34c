"""Logging setup helpers for sqlcount."""

from __future__ import annotations

import logging

LOGGER_NAME = "sqlcount"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Silent unless the host application or configure_logging() adds a handler.
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(debug: bool = False) -> logging.Logger:
    """Route sqlcount records to stderr without touching the root logger."""
    logger = get_logger()
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not any(isinstance(handler, _StderrHandler) for handler in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or LOGGER_NAME)


class _StderrHandler(logging.StreamHandler):
    pass
