"""Validation, normalization and formatting of Paraguayan RUC numbers."""
from rucpy.validation.errors import ErrorKind, RucError, RucFormatError
from rucpy.validation.ruc import (
    InvalidRuc,
    ValidRuc,
    ValidationResult,
    calc_check_digit,
    compact,
    format,
    is_valid,
    validate,
)

__all__ = [
    "ErrorKind",
    "InvalidRuc",
    "RucError",
    "RucFormatError",
    "ValidRuc",
    "ValidationResult",
    "calc_check_digit",
    "compact",
    "format",
    "is_valid",
    "validate",
]
