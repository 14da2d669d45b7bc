"""
Check digit (DV) engine for Chilean RUTs.

Implements the official módulo 11 algorithm:
1. Multiply each digit (from right to left) by sequence 2,3,4,5,6,7,2,3,4...
2. Sum all products
3. Calculate 11 - (sum % 11)
4. If result is 11, DV is 0; if 10, DV is K; otherwise DV is the result

Range checks on the body belong to the callers; these are pure primitives.
"""

# Weight cycle applied from the least significant digit
FIRST_WEIGHT = 2
LAST_WEIGHT = 7


def _check_body(body: int) -> None:
    # bool is an int subclass
    if isinstance(body, bool) or not isinstance(body, int):
        raise TypeError(f"body must be an int, got {type(body).__name__}")
    if body < 0:
        raise ValueError(f"body must be non-negative, got {body}")


def weighted_sum(body: int) -> int:
    """
    Sum of the body digits multiplied by the cyclic 2..7 weights.

    Examples:
        >>> weighted_sum(17951585)
        169
        >>> weighted_sum(123)
        16
    """
    _check_body(body)

    total = 0
    multiplier = FIRST_WEIGHT

    for digit in reversed(str(body)):
        total += int(digit) * multiplier
        multiplier = FIRST_WEIGHT if multiplier == LAST_WEIGHT else multiplier + 1

    return total


def compute_check(body: int) -> str:
    """
    Compute the check character for a RUT body.

    Args:
        body: Non-negative integer body

    Returns:
        One of '0'..'9' or 'K'

    Raises:
        TypeError: If body is not an int
        ValueError: If body is negative

    Examples:
        >>> compute_check(17951585)
        '7'
        >>> compute_check(24136773)
        '8'
        >>> compute_check(1000005)
        'K'
    """
    remainder = 11 - (weighted_sum(body) % 11)

    if remainder == 11:
        return "0"
    if remainder == 10:
        return "K"
    return str(remainder)


def validate(body: int, check: str) -> bool:
    """
    Check whether ``check`` is the DV of ``body``.

    The comparison is case-insensitive, so 'k' and 'K' are equivalent.

    Examples:
        >>> validate(17951585, "7")
        True
        >>> validate(1000005, "k")
        True
        >>> validate(17951585, "K")
        False
    """
    if not isinstance(check, str) or len(check) != 1:
        return False

    return compute_check(body) == check.upper()
