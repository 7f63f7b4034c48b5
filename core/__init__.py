"""Validation core for the onboarding wizard."""

from .rules import ErrorKind, FieldError, RuleContext, ValidationResult
from .schema import validate_record, validate_section

__all__ = [
    "ErrorKind",
    "FieldError",
    "RuleContext",
    "ValidationResult",
    "validate_record",
    "validate_section",
]
