"""
Custom exceptions for motionprofiles.

All motionprofiles exceptions inherit from MotionProfileError for easy catching.
"""

from typing import Any


class MotionProfileError(Exception):
    """Base exception for all motionprofiles errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(MotionProfileError):
    """Raised when profile settings are invalid or missing."""

    pass


class ProfileNotFoundError(MotionProfileError):
    """Raised when no profile is registered for a stage and name."""

    def __init__(
        self,
        message: str,
        stage: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.stage = stage


class ProfileRegistrationError(MotionProfileError):
    """Raised when a profile cannot be registered."""

    def __init__(
        self,
        message: str,
        stage: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.stage = stage
