"""Logger setup for the eitherkit hierarchy.

Modules log through ``logging.getLogger("eitherkit.<module>")``; this sets the
level of the shared ``eitherkit`` parent logger.
"""

from __future__ import annotations

import logging

from .config import get_settings

ROOT_LOGGER = "eitherkit"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Set the eitherkit logger level from level, or from settings when omitted."""
    name = (level or get_settings().logging.level).upper()
    if name not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log level: {name}")
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(name)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger under the eitherkit hierarchy."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
