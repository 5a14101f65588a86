"""Core PassGuard utilities.

This module exports configuration, logging and error types for use
throughout the application.
"""

from passguard.core.config import Settings, get_settings
from passguard.core.exceptions import InvalidConfigurationError, PassGuardError
from passguard.core.logging import (
    LoggingContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "InvalidConfigurationError",
    "PassGuardError",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "bind_context",
    "clear_context",
]
