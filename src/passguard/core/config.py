"""Configuration management for PassGuard.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable during runtime.
"""

import string
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from passguard.core.exceptions import InvalidConfigurationError

DEFAULT_ALLOWED_CHARACTERS = string.ascii_letters + string.digits


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PASSGUARD_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Allowed Character Rule Settings
    allowed_characters: str = Field(
        default=DEFAULT_ALLOWED_CHARACTERS,
        description="Characters a password may contain",
    )
    match_behavior: str = Field(
        default="contains",
        description="Where a disallowed character must occur to be reported",
    )
    report_all_failures: bool = True
    enhanced_error_messages: bool = Field(
        default=False,
        description="Report an error code specific to each offending character",
    )

    @field_validator("allowed_characters")
    @classmethod
    def validate_allowed_characters(cls, v: str) -> str:
        """Reject an empty allowed character set."""
        if not v:
            raise InvalidConfigurationError(
                "allowed characters length must be greater than zero"
            )
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once; call ``get_settings.cache_clear()`` to reload.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
