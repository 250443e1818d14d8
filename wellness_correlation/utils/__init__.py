"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    WellnessCorrelationError,
    InputValidationError,
    CorrelationError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "WellnessCorrelationError",
    "InputValidationError",
    "CorrelationError",
]
