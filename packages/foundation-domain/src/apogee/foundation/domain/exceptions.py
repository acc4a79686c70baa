"""Domain exception hierarchy for type-safe error handling.

This module provides the base exception hierarchy for parameter-set errors.
Exceptions include structured error codes and context for consistent
logging and caller-side handling.

Example:
    >>> from apogee.foundation.domain.exceptions import ValidationError
    >>> raise ValidationError("default_value", "Default value must not be None")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from apogee.foundation.domain.identifiers import FlightConfigurationId

__all__ = [
    "ConfigurationIndexError",
    "DomainError",
    "InvalidConfigurationIdError",
    "ValidationError",
]


class DomainError(Exception):
    """Base class for all domain errors.

    Provides error code and structured context for debugging. All domain
    exceptions inherit from this class to enable consistent handling and
    logging.

    Attributes:
        error_code: Machine-readable error code for client handling.
        message: Human-readable error description.
        context: Structured debugging information (ids, field names).

    Example:
        >>> raise DomainError("Operation failed", context={"fcid": "123"})
        DomainError: Operation failed (fcid=123)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ValidationError(DomainError):
    """Raised when an argument fails domain validation rules.

    Used when a required parameter value is missing, for example a ``None``
    default value.

    Attributes:
        error_code: "VALIDATION_ERROR" (class constant).
        field: Argument name that failed validation.
        reason: Human-readable validation failure reason.

    Example:
        >>> raise ValidationError("value", "Default value must not be None")
        ValidationError: Validation failed for 'value': Default value must not be None
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        field: str,
        reason: str,
        **extra_context: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            field: Argument name that failed validation.
            reason: Human-readable validation failure reason.
            **extra_context: Additional debugging context.
        """
        self.field = field
        self.reason = reason
        message = f"Validation failed for '{field}': {reason}"
        context = {
            "field": field,
            "reason": reason,
            **extra_context,
        }
        super().__init__(message, context)


class InvalidConfigurationIdError(DomainError):
    """Raised when a flight configuration id carrying the error marker is used.

    Distinct from "no override exists", which silently falls back to the
    default value.

    Attributes:
        error_code: "INVALID_CONFIGURATION_ID" (class constant).
        fcid: The rejected identifier.
        operation: Name of the operation that rejected it.
    """

    error_code: str = "INVALID_CONFIGURATION_ID"

    def __init__(self, fcid: FlightConfigurationId, operation: str) -> None:
        self.fcid = fcid
        self.operation = operation
        message = f"Attempted to {operation} a parameter with an error key"
        context = {"fcid": str(fcid), "operation": operation}
        super().__init__(message, context)


class ConfigurationIndexError(DomainError, IndexError):
    """Raised when positional access falls outside the override list.

    Also an ``IndexError`` so callers iterating by position can rely on the
    built-in contract.

    Attributes:
        error_code: "CONFIGURATION_INDEX_OUT_OF_RANGE" (class constant).
        index: Requested position.
        size: Number of overrides at the time of the request.

    Example:
        >>> raise ConfigurationIndexError(index=3, size=2)
        ConfigurationIndexError: Configuration index 3 out of range for 2 overrides
    """

    error_code: str = "CONFIGURATION_INDEX_OUT_OF_RANGE"

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        message = f"Configuration index {index} out of range for {size} overrides"
        super().__init__(message, {"index": index, "size": size})
