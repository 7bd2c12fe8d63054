"""Configuration module for fieldrules.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from fieldrules.config import get_settings

    settings = get_settings()

    # Defaults for RequiredValidator
    zero_is_missing = settings.rules.required_zero_is_missing

    # Logging
    log_level = settings.logging.log_level
"""

from fieldrules.config.settings import (
    LoggingSettings,
    RuleSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "RuleSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
