"""
rutlib

Validate, parse, format and generate Chilean RUTs:
- Módulo 11 check digit engine
- Lenient parser for "17.951.585-7", "17951585-7" and "179515857"
- DOTS / DASH / NONE rendering
- Random valid RUTs for fixtures
"""

__version__ = "0.1.0"

from .helpers import (  # noqa: E402
    RUT_MAX,
    RUT_MIN,
    ErrorKind,
    Format,
    InvalidCheckDigitError,
    InvalidFormatError,
    OutOfRangeError,
    Rut,
    RutError,
    RutResult,
    compute_check,
    format_rut,
    from_number,
    normalize_rut,
    parse,
    randomize,
    randomize_many,
    render,
    validate,
    validate_rut,
)

__all__ = [
    "__version__",
    "RUT_MAX",
    "RUT_MIN",
    "ErrorKind",
    "Format",
    "InvalidCheckDigitError",
    "InvalidFormatError",
    "OutOfRangeError",
    "Rut",
    "RutError",
    "RutResult",
    "compute_check",
    "format_rut",
    "from_number",
    "normalize_rut",
    "parse",
    "randomize",
    "randomize_many",
    "render",
    "validate",
    "validate_rut",
]
