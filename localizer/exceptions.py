"""
Custom Exception Classes for Localizer

This module defines the exceptions raised by the localization layer.
Request-time resolution never raises; these cover configuration that
cannot be honoured (bad culture names, uncompilable exclusion patterns).
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes included in error responses."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INVALID_EXCLUDED_ROUTE = "CONFIGURATION_INVALID_EXCLUDED_ROUTE"
    INVALID_CULTURE = "CONFIGURATION_INVALID_CULTURE"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class LocalizerError(Exception):
    """Base exception class for all localizer exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(LocalizerError):
    """Raised when localization settings cannot be applied"""

    def __init__(
        self,
        message: str = "Invalid localization configuration",
        error_code: ErrorCode = ErrorCode.CONFIGURATION_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code=error_code,
            details=details or {},
        )


class InvalidExcludedRouteError(ConfigurationError):
    """Raised when an excluded route pattern is not a valid regular expression"""

    def __init__(self, pattern: str, reason: str | None = None):
        message = f"Excluded route pattern '{pattern}' is not a valid regular expression"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_EXCLUDED_ROUTE,
            details={"pattern": pattern, "reason": reason},
        )
        self.pattern = pattern


class InvalidCultureError(ConfigurationError):
    """Raised when a configured culture name is not of the form xx or xx-YY"""

    def __init__(self, name: str):
        super().__init__(
            message=f"Culture name '{name}' is not of the form 'xx' or 'xx-YY'",
            error_code=ErrorCode.INVALID_CULTURE,
            details={"culture": name},
        )
        self.name = name


# ============================================================================
# Lookup Exceptions
# ============================================================================


class UnsupportedCultureError(LocalizerError):
    """Raised when a culture is looked up that the application does not support"""

    def __init__(self, name: str, supported: list[str] | None = None):
        super().__init__(
            message=f"Culture '{name}' is not supported",
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=ErrorCode.RESOURCE_NOT_FOUND,
            details={"culture": name, "supported_cultures": supported or []},
        )
