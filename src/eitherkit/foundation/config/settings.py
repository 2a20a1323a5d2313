"""Environment-based configuration using pydantic-settings.

Example:
    >>> from eitherkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.render_limit
    200
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # EITHERKIT_RENDER_LIMIT=80
    # EITHERKIT_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EITHERKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class EitherkitSettings(BaseSettings):
    """Root settings for eitherkit.

    Example environment variables:
        EITHERKIT_RENDER_LIMIT=80
        EITHERKIT_LOG_FAILURES=false
        EITHERKIT_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="EITHERKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    render_limit: PositiveInt = Field(
        default=200,
        description="Max characters of a payload rendering embedded in a LogicError",
    )
    log_failures: bool = Field(
        default=True,
        description="Log an error record before an unsafe extraction raises",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> EitherkitSettings:
    """Get the global settings instance (cached)."""
    return EitherkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
