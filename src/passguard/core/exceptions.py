"""Exceptions for rule construction and configuration."""


class PassGuardError(Exception):
    """Base class for all PassGuard errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidConfigurationError(PassGuardError, ValueError):
    """Raised when a rule cannot be built from the supplied configuration.

    Subclasses ValueError so pydantic validators surface it as a
    validation error.
    """
