"""Validation module for checking compensation inputs."""

from oncallcalc.validation.validator import (
    InputValidator,
    ValidationError,
    ValidationErrorType,
    ValidationResult,
)

__all__ = [
    "InputValidator",
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
]
