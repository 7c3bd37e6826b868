"""Loggers for the ``rune`` package.

Modules take a logger from :func:`get_logger`. The CLI calls
:func:`configure_logging` once, after ``.env`` files are loaded, so
``RUNE_LOG_LEVEL`` may come from either place.
"""
import logging
import os
from typing import Optional, Union

ROOT_LOGGER = "rune"
LOG_LEVEL_ENV = "RUNE_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``rune`` namespace."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def resolve_level(level: Union[int, str, None] = None) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV) or DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    logging.basicConfig(format=LOG_FORMAT)
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(resolve_level(level))
    return logger
