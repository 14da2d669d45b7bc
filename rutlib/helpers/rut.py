"""
RUT (Rol Único Tributario) parsing, formatting and validation for Chile.

A RUT is a numeric body plus a check character (DV) derived from the body
with the módulo 11 algorithm (see check_digit). This module owns the Rut
value type and the ways to obtain one:

- parse(): from loosely formatted text ("17.951.585-7", "17951585-7", "179515857")
- from_number(): from a bare body, deriving the DV
- randomize() lives in randomizer and builds on the check digit engine only

Construction never raises; failures come back in a RutResult.

Parsing is lenient about dots: every '.' is removed before matching, so
thousands grouping is not checked ("1.7951585-7" is accepted). Commas,
whitespace and misplaced dashes are rejected.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..log_config import get_logger
from .check_digit import compute_check
from .errors import (
    RUT_MAX,
    RUT_MIN,
    InvalidCheckDigitError,
    InvalidFormatError,
    OutOfRangeError,
    RutError,
    format_thousands,
)

logger = get_logger(__name__)

# 1 to 8 body digits, optional dash, DV (after dot removal and K uppercasing)
RUT_PATTERN = re.compile(r"(?P<body>[0-9]{1,8})-?(?P<check>[0-9K])")


class Format(Enum):
    """Display format for a RUT."""

    DOTS = "dots"   # 17.951.585-7
    DASH = "dash"   # 17951585-7
    NONE = "none"   # 179515857

    @classmethod
    def from_name(cls, name: str) -> "Format":
        """
        Look up a format by name, case-insensitively.

        Raises:
            ValueError: If the name is not a known format
        """
        try:
            return cls[name.upper()]
        except KeyError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown RUT format '{name}'. Expected one of: {valid}") from None


class Rut:
    """
    A validated Chilean RUT.

    Instances always satisfy RUT_MIN <= body <= RUT_MAX and
    check == compute_check(body). They are immutable and hashable.
    Use parse(), from_number() or randomize() to get one.
    """

    __slots__ = ("_body", "_check")

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise TypeError(
            "Rut cannot be instantiated directly; "
            "use parse(), from_number() or randomize()"
        )

    @classmethod
    def _signed(cls, body: int, check: str) -> "Rut":
        # Callers guarantee the body is in range and check is its DV
        rut = object.__new__(cls)
        object.__setattr__(rut, "_body", body)
        object.__setattr__(rut, "_check", check)
        return rut

    @property
    def body(self) -> int:
        """Numeric body, without the DV."""
        return self._body

    @property
    def check(self) -> str:
        """Check character: '0'..'9' or 'K'."""
        return self._check

    def to_format(self, fmt: "Format" = Format.DASH) -> str:
        """Render this RUT; see render()."""
        return render(self, fmt)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Rut is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Rut is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rut):
            return NotImplemented
        return self._body == other._body and self._check == other._check

    def __hash__(self) -> int:
        return hash((self._body, self._check))

    def __str__(self) -> str:
        return render(self, Format.DASH)

    def __repr__(self) -> str:
        return f"Rut('{self}')"

    def __reduce__(self) -> tuple:
        return (_restore, (self._body,))


def _restore(body: int) -> Rut:
    """Rebuild a Rut when unpickling or copying."""
    return Rut._signed(body, compute_check(body))


@dataclass(frozen=True)
class RutResult:
    """
    Outcome of building a Rut: exactly one of value or error is set.

    Examples:
        >>> result = parse("17.951.585-7")
        >>> result.ok
        True
        >>> result.unwrap().body
        17951585
        >>> str(parse("17951585K").error)
        'Invalid DV, must be 7, instead K.'
    """

    value: Optional[Rut] = None
    error: Optional[RutError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("RutResult needs exactly one of value or error")

    @classmethod
    def success(cls, rut: Rut) -> "RutResult":
        return cls(value=rut)

    @classmethod
    def failure(cls, error: RutError) -> "RutResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Rut:
        """
        Return the Rut, or raise the carried error.

        Raises:
            RutError: The construction error
        """
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: Optional[Rut] = None) -> Optional[Rut]:
        """Return the Rut, or default on failure."""
        return self.value if self.error is None else default


def _reject(error: RutError, raw: object) -> RutResult:
    logger.debug("RUT rejected", reason=error.kind.value, input=repr(raw), error=str(error))
    return RutResult.failure(error)


def _normalize(text: str) -> str:
    """Remove every dot and uppercase a trailing 'k'."""
    cleaned = text.replace(".", "")
    if cleaned.endswith("k"):
        cleaned = cleaned[:-1] + "K"
    return cleaned


def parse(text: str) -> RutResult:
    """
    Parse a RUT from text.

    Accepted shapes, after removing every dot: 1 to 8 digits, an optional
    dash, then the DV (digit or K/k).

    Args:
        text: RUT string such as "17.951.585-7", "17951585-7" or "179515857"

    Returns:
        RutResult holding the Rut, or one of InvalidFormatError,
        OutOfRangeError, InvalidCheckDigitError

    Examples:
        >>> parse("17.951.585-7").unwrap()
        Rut('17951585-7')
        >>> str(parse("17,951,585-7").error)
        'The input format is invalid'
    """
    if not isinstance(text, str):
        return _reject(InvalidFormatError(), text)

    match = RUT_PATTERN.fullmatch(_normalize(text))
    if not match:
        return _reject(InvalidFormatError(), text)

    body = int(match.group("body"))
    check = match.group("check")

    if not RUT_MIN <= body <= RUT_MAX:
        return _reject(OutOfRangeError(body), text)

    expected = compute_check(body)
    if check != expected:
        return _reject(InvalidCheckDigitError(expected, check), text)

    return RutResult.success(Rut._signed(body, expected))


def from_number(body: int) -> RutResult:
    """
    Build a Rut from its body, deriving the DV.

    Args:
        body: Integer between RUT_MIN and RUT_MAX (inclusive)

    Returns:
        RutResult holding the Rut, or OutOfRangeError

    Examples:
        >>> from_number(24136773).unwrap().check
        '8'
        >>> from_number(999_999).error.kind
        <ErrorKind.OUT_OF_RANGE: 'out_of_range'>
    """
    if isinstance(body, bool) or not isinstance(body, int):
        return _reject(OutOfRangeError(body), body)
    if not RUT_MIN <= body <= RUT_MAX:
        return _reject(OutOfRangeError(body), body)

    return RutResult.success(Rut._signed(body, compute_check(body)))


def render(rut: Rut, fmt: Format = Format.DASH) -> str:
    """
    Render a Rut as text.

    Examples:
        >>> rut = from_number(17951585).unwrap()
        >>> render(rut, Format.DOTS)
        '17.951.585-7'
        >>> render(rut, Format.DASH)
        '17951585-7'
        >>> render(rut, Format.NONE)
        '179515857'
    """
    if fmt is Format.DOTS:
        return f"{format_thousands(rut.body)}-{rut.check}"
    if fmt is Format.DASH:
        return f"{rut.body}-{rut.check}"
    if fmt is Format.NONE:
        return f"{rut.body}{rut.check}"
    raise ValueError(f"Unsupported RUT format: {fmt!r}")


def normalize_rut(text: str) -> Optional[str]:
    """
    Normalize a RUT string to canonical format: <body>-<DV>

    Returns None when the text is not a valid RUT.

    Examples:
        >>> normalize_rut("17.951.585-7")
        '17951585-7'
        >>> normalize_rut("1.000.005-k")
        '1000005-K'
        >>> normalize_rut("17951585-K") is None
        True
    """
    return format_rut(text, Format.DASH)


def format_rut(text: str, fmt: Format = Format.DOTS) -> Optional[str]:
    """Reformat a valid RUT string, or return None."""
    rut = parse(text).unwrap_or(None)
    if rut is None:
        return None
    return render(rut, fmt)


def validate_rut(text: str) -> bool:
    """
    Validate a RUT string (format, range and DV).

    Examples:
        >>> validate_rut("17.951.585-7")
        True
        >>> validate_rut("17951585-K")
        False
    """
    return parse(text).ok
