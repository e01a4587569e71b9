"""Logging configuration for ledgerly.

``configure_logging`` attaches a single ``StreamHandler`` to the package
logger (``"ledgerly"``) and is meant to be called once by entry points such as
the CLI. ``get_logger`` hands out named loggers and keeps the package logger
silent (``NullHandler``) until an application configures it.

Library modules never attach handlers of their own.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

PACKAGE_LOGGER_NAME = "ledgerly"
LOG_LEVEL_ENV = "LEDGERLY_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_handler: logging.Handler | None = None


def parse_level(level: int | str | None) -> int:
    """Resolve a level given as int, numeric string or level name.

    ``None`` falls back to ``LEDGERLY_LOG_LEVEL`` and then to ``INFO``.
    """
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        raise ValueError(f"Unknown log level '{level}'")
    env_val = os.getenv(LOG_LEVEL_ENV)
    if env_val:
        return parse_level(env_val)
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure the package logger.

    Calling again replaces the handler installed by the previous call, so
    repeated CLI invocations in one process do not stack handlers.

    Args:
        level: Level as int or name; see ``parse_level``
        fmt: Optional format string (defaults to ``DEFAULT_FORMAT``)
        stream: Output stream (defaults to ``sys.stderr`` at call time)
    """
    global _handler

    resolved = parse_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler) or h is _handler:
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    _handler = handler


def reset_logging() -> None:
    """Remove the handler installed by ``configure_logging``."""
    global _handler

    if _handler is not None:
        logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        logger.removeHandler(_handler)
        logger.setLevel(logging.NOTSET)
        _handler = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, keeping the package logger quiet until configured."""
    pkg_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _handler is None and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
