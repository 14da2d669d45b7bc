"""
Chilean RUT helpers.

This package provides the módulo 11 check digit engine, the Rut value type
with its parser and formatter, and a randomizer for test fixtures.
"""

from .check_digit import compute_check, validate, weighted_sum
from .errors import (
    RUT_MAX,
    RUT_MIN,
    ErrorKind,
    InvalidCheckDigitError,
    InvalidFormatError,
    OutOfRangeError,
    RutError,
)
from .randomizer import randomize, randomize_many
from .rut import (
    Format,
    Rut,
    RutResult,
    format_rut,
    from_number,
    normalize_rut,
    parse,
    render,
    validate_rut,
)

__all__ = [
    "compute_check",
    "validate",
    "weighted_sum",
    "RUT_MAX",
    "RUT_MIN",
    "ErrorKind",
    "InvalidCheckDigitError",
    "InvalidFormatError",
    "OutOfRangeError",
    "RutError",
    "randomize",
    "randomize_many",
    "Format",
    "Rut",
    "RutResult",
    "format_rut",
    "from_number",
    "normalize_rut",
    "parse",
    "render",
    "validate_rut",
]
