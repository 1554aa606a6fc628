"""Logging utilities."""

from __future__ import annotations

import logging
from typing import Any

from .settings import settings

logger = logging.getLogger("category_slugs")

DEFAULT_LEVEL = logging.INFO
LOG_FORMAT = "%(levelname)-5.5s [%(name)s] %(message)s"

_handler: logging.Handler | None = None


def parse_log_level(value: Any) -> int:
    """Return a numeric logging level for ``value``, defaulting to INFO."""

    if value is None:
        return DEFAULT_LEVEL
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return DEFAULT_LEVEL
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if isinstance(level, int):
        return level
    return DEFAULT_LEVEL


def configure_logging(value: Any = None) -> int:
    """Send project logs to stderr at the level from ``value`` or the settings.

    Calling it again replaces the handler installed by the previous call.
    """

    global _handler

    level = parse_log_level(value if value is not None else settings.log_level)
    app_logger = logging.getLogger("backend.app")

    if _handler is not None:
        app_logger.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    app_logger.addHandler(_handler)

    logger.setLevel(level)
    app_logger.setLevel(level)
    return level


__all__ = [
    "logger",
    "parse_log_level",
    "configure_logging",
    "DEFAULT_LEVEL",
    "LOG_FORMAT",
]
