"""Logging setup for the ``intern`` package.

One stream handler goes on the root logger. Verbosity is set on the
``intern`` namespace only, so NiceGUI, asyncio and Tk helpers stay at
WARNING while the app's own loggers follow ``INTERN_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

PACKAGE_LOGGER = "intern"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "INTERN_LOG_LEVEL"
DEBUG_ENV = "INTERN_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def env_truthy(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


def resolve_level(
    env: Optional[Mapping[str, str]] = None, default: int = logging.INFO
) -> int:
    """Pick the package log level from ``env`` (defaults to ``os.environ``).

    ``INTERN_LOG_LEVEL`` takes a level name or number and wins over
    ``INTERN_DEBUG``. Unknown level names are ignored.
    """
    source = os.environ if env is None else env
    raw = (source.get(LEVEL_ENV) or "").strip()
    if raw:
        level = int(raw) if raw.isdigit() else logging.getLevelName(raw.upper())
        if isinstance(level, int):
            return level
    if env_truthy(source.get(DEBUG_ENV)):
        return logging.DEBUG
    return default


def configure_logging(
    default_level: int = logging.INFO, *, env: Optional[Mapping[str, str]] = None
) -> logging.Logger:
    """Install the console handler once and set the ``intern`` logger level."""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)

    package = logging.getLogger(PACKAGE_LOGGER)
    package.setLevel(resolve_level(env, default_level))
    return package


__all__ = ["PACKAGE_LOGGER", "configure_logging", "env_truthy", "resolve_level"]
