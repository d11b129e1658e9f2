"""
Custom Exceptions
=================

Defines custom exception classes for the ECA Advisor.
All exceptions include error codes for programmatic handling.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Error codes for programmatic error handling."""

    # General errors (1000-1099)
    UNKNOWN_ERROR = 1000
    CONFIGURATION_ERROR = 1001

    # Input errors (1100-1199)
    INVALID_INPUT = 1100


class AdvisorError(Exception):
    """Base exception for all ECA Advisor errors.

    Attributes:
        message: Human-readable error message.
        error_code: Programmatic error code.
        details: Additional error context.
        cause: Original exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[dict] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Programmatic error code.
            details: Additional context as key-value pairs.
            cause: Original exception if wrapping another error.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return a formatted error string."""
        result = f"[{self.error_code.name}] {self.message}"
        if self.details:
            result += f" | Details: {self.details}"
        if self.cause:
            result += f" | Caused by: {type(self.cause).__name__}: {self.cause}"
        return result

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }


class ConfigurationError(AdvisorError):
    """Raised when there's a configuration problem.

    Examples:
        - Configuration document is not a mapping
        - A configuration section has the wrong shape
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        expected_type: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        if expected_type:
            details["expected_type"] = expected_type
        super().__init__(
            message,
            error_code=ErrorCode.CONFIGURATION_ERROR,
            details=details,
            **kwargs
        )


class InvalidInputError(AdvisorError, ValueError):
    """Raised when a recommendation is requested without a usable input.

    The only hard failure of the recommendation entry point: the file
    handle is absent.
    """

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if argument:
            details["argument"] = argument
        super().__init__(
            message,
            error_code=ErrorCode.INVALID_INPUT,
            details=details,
            **kwargs
        )
