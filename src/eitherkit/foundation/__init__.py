"""Foundation: configuration, errors, logging."""

from .config import EitherkitSettings, LoggingSettings, clear_settings_cache, get_settings
from .errors import ExtractionFailure, LogicError
from .logging import configure_logging, get_logger

__all__ = [
    "EitherkitSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
    "ExtractionFailure",
    "LogicError",
    "configure_logging",
    "get_logger",
]
