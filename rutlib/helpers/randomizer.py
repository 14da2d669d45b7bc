"""
Random RUT generation for test fixtures.

Uses the check digit engine directly; parsing is never involved.
"""

import random
from typing import List, Optional

from .check_digit import compute_check
from .errors import RUT_MAX, RUT_MIN
from .rut import Rut


def randomize(rng: Optional[random.Random] = None) -> Rut:
    """
    Generate a valid Rut with a uniformly drawn body.

    Args:
        rng: Random source (defaults to the process-wide ``random`` module)

    Returns:
        Rut with RUT_MIN <= body <= RUT_MAX
    """
    source = rng if rng is not None else random
    body = source.randint(RUT_MIN, RUT_MAX)
    return Rut._signed(body, compute_check(body))


def randomize_many(count: int, rng: Optional[random.Random] = None) -> List[Rut]:
    """
    Generate ``count`` random RUTs (not necessarily distinct).

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return [randomize(rng) for _ in range(count)]
