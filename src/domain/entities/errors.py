"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class PeriodError(DomainError):
    """Base class for errors raised by period descriptions."""


class InvalidPeriodError(PeriodError, ValueError):
    """Raised when calendar coordinates do not identify a valid period."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class UnsupportedNavigationError(PeriodError):
    """Raised when a period cannot perform the requested navigation."""

    def __init__(
        self, kind: str, operation: str, details: Optional[Dict[str, Any]] = None
    ):
        message = f"{kind} does not support {operation}()"
        super().__init__(message, {"kind": kind, "operation": operation, **(details or {})})


class MeasurementPayloadError(DomainError, ValueError):
    """Raised when a wire payload cannot be decoded into measurements."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
