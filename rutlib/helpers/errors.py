"""
Errors reported when a RUT cannot be built.

These are returned inside a RutResult by the construction functions; they
subclass ValueError so callers that prefer exceptions can raise them
(RutResult.unwrap does exactly that).
"""

from enum import Enum
from typing import Optional

# Valid body range (inclusive)
RUT_MIN = 1_000_000
RUT_MAX = 99_999_999


def format_thousands(number: int) -> str:
    """
    Group digits in thousands with dots, Chilean style.

    Examples:
        >>> format_thousands(17951585)
        '17.951.585'
        >>> format_thousands(999)
        '999'
    """
    return f"{number:,}".replace(",", ".")


class ErrorKind(Enum):
    """Kind of construction failure."""

    INVALID_FORMAT = "invalid_format"
    INVALID_CHECK_DIGIT = "invalid_check_digit"
    OUT_OF_RANGE = "out_of_range"


class RutError(ValueError):
    """Base class for RUT construction errors."""

    kind: ErrorKind

    @property
    def message(self) -> str:
        return str(self)


class InvalidFormatError(RutError):
    """Input does not look like a RUT."""

    kind = ErrorKind.INVALID_FORMAT

    def __init__(self) -> None:
        super().__init__("The input format is invalid")


class InvalidCheckDigitError(RutError):
    """Supplied DV does not match the one computed from the body."""

    kind = ErrorKind.INVALID_CHECK_DIGIT

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid DV, must be {expected}, instead {actual}.")


class OutOfRangeError(RutError):
    """Body is outside RUT_MIN..RUT_MAX."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, value: Optional[object] = None) -> None:
        self.value = value
        super().__init__(
            f"The input number must be between {format_thousands(RUT_MIN)} "
            f"to {format_thousands(RUT_MAX)}"
        )
