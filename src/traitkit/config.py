"""Settings for traitkit.

Values come from environment variables prefixed with ``TRAITKIT_`` and an
optional ``.env`` file.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class LogFormat(StrEnum):
    """Output formats understood by configure_logging."""

    TEXT = "text"
    JSON = "json"


class TraitSettings(BaseSettings):
    """Runtime settings for the trait engine.

    Environment Variables:
        TRAITKIT_LOG_LEVEL: Level for the traitkit logger (default: INFO)
        TRAITKIT_LOG_FORMAT: 'text' or 'json' (default: text)
        TRAITKIT_LOG_CONFLICTS: Warn on every conflict a merge produces (default: false)
        TRAITKIT_CLASS_NAME: Name of classes synthesised by create (default: TraitObject)

    Example:
        >>> settings = TraitSettings()
        >>> settings = TraitSettings(_env_file=".env")
    """

    model_config = SettingsConfigDict(
        env_prefix="TRAITKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Log level name for the traitkit namespace",
    )
    log_format: LogFormat = Field(
        default=LogFormat.TEXT,
        description="Log output format",
    )
    log_conflicts: bool = Field(
        default=False,
        description="Log a warning whenever a merge manufactures a conflict",
    )
    class_name: str = Field(
        default="TraitObject",
        min_length=1,
        description="Name given to classes synthesised by create",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> str:
        """Upper-case the level name and fall back to INFO when unknown."""
        name = str(v).upper()
        return name if name in LOG_LEVELS else "INFO"

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_format(cls, v: Any) -> LogFormat:
        """Lower-case the format name and fall back to text when unknown."""
        try:
            return LogFormat(str(v).lower())
        except ValueError:
            return LogFormat.TEXT

    @field_validator("class_name")
    @classmethod
    def check_identifier(cls, v: str) -> str:
        """Class names must be valid Python identifiers."""
        if not v.isidentifier():
            raise ValueError(f"class_name must be an identifier, got {v!r}")
        return v

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return LOG_LEVELS[self.log_level]


@lru_cache
def get_trait_settings() -> TraitSettings:
    """Get cached settings singleton.

    To reload, call get_trait_settings.cache_clear() first.

    Returns:
        TraitSettings instance with values from the environment.
    """
    settings = TraitSettings()
    logger.debug("Loaded trait settings: %r", settings)
    return settings
