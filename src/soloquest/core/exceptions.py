"""Custom exception hierarchy for the SoloQuest character toolkit.

All exceptions inherit from SoloQuestError, so callers can catch the whole
family at the application boundary while each domain keeps its own context.

Example:
    >>> from soloquest.core.exceptions import StorageError
    >>> raise StorageError("Failed to write collection", key="soloquest_npcs")
"""

from __future__ import annotations

from typing import Any


class SoloQuestError(Exception):
    """Base exception for all SoloQuest errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(SoloQuestError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(SoloQuestError):
    """Raised when domain input fails validation.

    Used for rule violations in caller-supplied values, such as an ability
    score improvement that names the same ability twice.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


# =============================================================================
# Rules Engine Exceptions
# =============================================================================


class RulesError(SoloQuestError):
    """Base exception for rules engine errors."""


class ProgressionError(RulesError):
    """Raised when a level-up cannot be committed.

    This occurs when a character is already at the level cap, or when an
    ability score improvement is offered at a level that does not grant one.
    """

    def __init__(
        self,
        message: str,
        *,
        current_level: int | None = None,
        target_level: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize progression error with level context.

        Args:
            message: Human-readable error description.
            current_level: The character's level before the attempted change.
            target_level: The level the character was advancing to.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if current_level is not None:
            combined_details["current_level"] = current_level
        if target_level is not None:
            combined_details["target_level"] = target_level
        super().__init__(message, details=combined_details)


class ReferenceDataError(SoloQuestError):
    """Raised when a required compendium lookup finds nothing."""

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if name:
            combined_details["name"] = name
        super().__init__(message, details=combined_details)


# =============================================================================
# Storage Exceptions
# =============================================================================


class StorageError(SoloQuestError):
    """Raised when the key-value store cannot be read or written."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize storage error with key context.

        Args:
            message: Human-readable error description.
            key: The storage key involved.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if key:
            combined_details["key"] = key
        super().__init__(message, details=combined_details)


class CorruptDataError(StorageError):
    """Describes a persisted collection that failed to parse or validate.

    The read path never lets this escape; it is built to carry recovery
    context into logs.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        backup_key: str | None = None,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if backup_key:
            combined_details["backup_key"] = backup_key
        if reason:
            combined_details["reason"] = reason
        super().__init__(message, key=key, details=combined_details)


__all__ = [
    "SoloQuestError",
    "ConfigurationError",
    "ValidationError",
    "RulesError",
    "ProgressionError",
    "ReferenceDataError",
    "StorageError",
    "CorruptDataError",
]
