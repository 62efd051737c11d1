"""Logging setup for the ``wordring`` package logger."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

PACKAGE_LOGGER = "wordring"
LEVEL_ENV = "WORDRING_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def resolve_level(level: Union[int, str, None] = None) -> int:
    """Turn a level number or name into a logging level.

    ``None`` reads :data:`LEVEL_ENV`; unknown names fall back to INFO.
    """

    if level is None:
        level = os.environ.get(LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    value = getattr(logging, level.strip().upper(), None)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Union[int, str, None] = None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling this again replaces the handler instead of stacking another.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    package = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package.handlers):
        package.removeHandler(existing)
    package.addHandler(handler)
    package.setLevel(resolve_level(level))
    package.propagate = False
    return package


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
