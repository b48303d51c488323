"""
Error types and error categories for compkit components.
Provides structured error handling across all packages.
"""

from enum import Enum
from typing import Dict, Any, Optional


class ErrorCategory(str, Enum):
    """Standard error categories used across compkit."""
    UNKNOWN = "unknown"
    INTERNAL = "internal"
    MISCONFIGURATION = "misconfiguration"
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    FILE_ERROR = "file_error"

    def __str__(self) -> str:
        return self.value


# Error category constants for easy import
UNKNOWN = ErrorCategory.UNKNOWN
INTERNAL = ErrorCategory.INTERNAL
MISCONFIGURATION = ErrorCategory.MISCONFIGURATION
INVALID_ARGUMENT = ErrorCategory.INVALID_ARGUMENT
NOT_FOUND = ErrorCategory.NOT_FOUND
CONFLICT = ErrorCategory.CONFLICT
FILE_ERROR = ErrorCategory.FILE_ERROR


class ComponentError(Exception):
    """
    Base exception for all compkit errors.

    Carries a machine-readable code (e.g. ``LOCK_TIMEOUT``), a category,
    the correlation id of the call that failed, structured details
    and an optional underlying cause.
    """

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN",
        category: ErrorCategory = UNKNOWN,
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.correlation_id = correlation_id
        self.details = details or {}
        self.cause = cause

    def with_details(self, key: str, value: Any) -> "ComponentError":
        """Attach a structured detail and return the same error."""
        self.details[key] = value
        return self

    def with_cause(self, cause: BaseException) -> "ComponentError":
        """Attach the underlying cause and return the same error."""
        self.cause = cause
        self.__cause__ = cause
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            'category': self.category.value,
            'code': self.code,
            'message': self.message,
            'details': {k: str(v) for k, v in self.details.items()}
        }

        if self.correlation_id:
            result['correlation_id'] = self.correlation_id

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class InvalidArgumentError(ComponentError):
    """Raised when a required argument is missing or invalid."""

    def __init__(
        self,
        message: str,
        code: str = "INVALID_ARGUMENT",
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, INVALID_ARGUMENT, correlation_id, details)


class NotFoundError(ComponentError):
    """Raised when a requested object does not exist."""

    def __init__(
        self,
        message: str,
        code: str = "NOT_FOUND",
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, NOT_FOUND, correlation_id, details)


class ReferenceMissingError(ComponentError):
    """Raised when a required component reference is not registered."""

    def __init__(self, correlation_id: Optional[str] = None, locator: Any = None):
        super().__init__(
            f"Failed to obtain reference to {locator}",
            "REF_ERROR",
            MISCONFIGURATION,
            correlation_id
        )
        self.locator = locator
        if locator is not None:
            self.details['locator'] = locator


class ConflictError(ComponentError):
    """Raised when an operation conflicts with the current state of a resource."""

    def __init__(
        self,
        message: str,
        code: str = "CONFLICT",
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, CONFLICT, correlation_id, details)


class LockTimeoutError(ConflictError):
    """Raised when a lock cannot be acquired before the retry timeout."""

    def __init__(self, correlation_id: Optional[str] = None, key: Optional[str] = None):
        super().__init__(
            f"Acquiring lock {key} failed on timeout",
            "LOCK_TIMEOUT",
            correlation_id
        )
        self.key = key
        self.details['key'] = key


class CreateError(ComponentError):
    """Raised when a factory fails to create a component."""

    def __init__(self, correlation_id: Optional[str] = None, message_or_locator: Any = None):
        if isinstance(message_or_locator, str):
            message = message_or_locator
        else:
            message = f"Requested component {message_or_locator} cannot be created"

        super().__init__(message, "CANNOT_CREATE", INTERNAL, correlation_id)

        if message_or_locator is not None and not isinstance(message_or_locator, str):
            self.details['locator'] = message_or_locator


class ConfigError(ComponentError):
    """Raised when a component is misconfigured."""

    def __init__(
        self,
        message: str,
        code: str = "CONFIG_ERROR",
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, MISCONFIGURATION, correlation_id, details)


class FileError(ComponentError):
    """Raised when a file cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        code: str = "FILE_ERROR",
        correlation_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, FILE_ERROR, correlation_id, details)


__all__ = [
    'ErrorCategory',
    'UNKNOWN',
    'INTERNAL',
    'MISCONFIGURATION',
    'INVALID_ARGUMENT',
    'NOT_FOUND',
    'CONFLICT',
    'FILE_ERROR',
    'ComponentError',
    'InvalidArgumentError',
    'NotFoundError',
    'ReferenceMissingError',
    'ConflictError',
    'LockTimeoutError',
    'CreateError',
    'ConfigError',
    'FileError',
]
