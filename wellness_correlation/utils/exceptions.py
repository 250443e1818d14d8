"""
Custom Exception Hierarchy

Provides specific exception types for the correlation service with
structured error information for API responses.
"""
from typing import Optional, Dict, Any


class WellnessCorrelationError(Exception):
    """Base exception for all correlation service errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "success": False,
            "error": self.message,
            "code": self.code,
            "details": self.details
        }


class InputValidationError(WellnessCorrelationError):
    """Request body did not match the expected analysis shapes."""

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid request data",
        errors: Optional[list] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"errors": errors or [], **(details or {})}
        )
        self.errors = errors or []


class CorrelationError(WellnessCorrelationError):
    """Errors while fusing analyses into correlation results."""

    def __init__(
        self,
        message: str,
        component: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="CORRELATION_ERROR",
            details={"component": component, **(details or {})}
        )
        self.component = component
