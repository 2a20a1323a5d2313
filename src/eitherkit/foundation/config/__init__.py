"""Configuration management using pydantic-settings."""

from .settings import EitherkitSettings, LoggingSettings, clear_settings_cache, get_settings

__all__ = [
    "EitherkitSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
