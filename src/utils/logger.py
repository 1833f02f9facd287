"""Centralised loguru logger shared by the engine, use cases and scripts."""
from __future__ import annotations

import sys

from loguru import logger

_DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> None:
    """Replace the default stderr sink with one filtered at ``level``.

    Scripts call this once after reading ``logging.level`` from the YAML config.
    """

    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=_DEFAULT_FORMAT)
    logger.debug("Logging configured at level {}", level.upper())


__all__ = ["configure_logging", "logger"]
