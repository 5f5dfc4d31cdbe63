"""
Gateway Reporting Error Model

This module provides the error handling framework for the gateway reporting SDK.
Request builders never raise for a report type they recognize; errors are
reserved for misuse of the fluent query API and for queries no registered
request builder can turn into a request.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Gateway reporting SDK error codes."""

    # General errors (1-99)
    UNKNOWN = 1

    # Query building errors (100-199)
    BUILDER_ERROR = 100
    INVALID_CRITERIA = 101
    INVALID_SORT_PROPERTY = 102
    INVALID_REPORT_TYPE = 103

    # Request dispatch errors (200-299)
    UNSUPPORTED_QUERY = 200

    # Configuration errors (300-399)
    INVALID_CONFIG = 300


class GatewayError(Exception):
    """
    Base class for all gateway reporting errors.

    Carries a structured error code and optional details so callers can
    log or serialize the failure without parsing the message.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a gateway error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GatewayError':
        """Create error from dictionary representation."""
        try:
            code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
        except ValueError:
            code = ErrorCode.UNKNOWN
        message = data.get("message", "Unknown error")
        details = data.get("details")
        return cls(message, code, details)


class BuilderError(GatewayError):
    """Report query builder misuse."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.BUILDER_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class UnsupportedQueryError(GatewayError):
    """No registered request builder can handle the query."""

    def __init__(self, message: str = "No request builder can process this query",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNSUPPORTED_QUERY, details, cause)


class ConfigError(GatewayError):
    """Invalid client configuration."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_CONFIG, details, cause)


__all__ = [
    "ErrorCode",
    "GatewayError",
    "BuilderError",
    "UnsupportedQueryError",
    "ConfigError",
]
