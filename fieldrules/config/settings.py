"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for all fieldrules settings.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuleSettings(BaseSettings):
    """Defaults applied by the built-in rules."""

    model_config = SettingsConfigDict(extra="ignore")

    required_zero_is_missing: bool = Field(
        default=True,
        validation_alias="REQUIRED_ZERO_IS_MISSING",
        description="RequiredValidator treats 0 as a missing value",
    )
    required_false_is_missing: bool = Field(
        default=True,
        validation_alias="REQUIRED_FALSE_IS_MISSING",
        description="RequiredValidator treats False as a missing value",
    )
    log_failures: bool = Field(
        default=False,
        validation_alias="RULES_LOG_FAILURES",
        description="Log every failed rule evaluation at INFO level",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for fieldrules namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from fieldrules.config import get_settings

        settings = get_settings()
        zero_is_missing = settings.rules.required_zero_is_missing
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    rules: RuleSettings = Field(default_factory=RuleSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
