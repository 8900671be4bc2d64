"""Secure container: counting candidate passwords."""

from __future__ import annotations

from collections import Counter
from itertools import pairwise

PUZZLE_LOW = 168630
PUZZLE_HIGH = 718098


def is_valid(number: int, strict: bool = False) -> bool:
    """Return whether digits never decrease and some digit repeats.

    With ``strict`` some digit must occur exactly twice.
    """
    digits = str(number)
    if any(a > b for a, b in pairwise(digits)):
        return False
    if strict:
        return 2 in Counter(digits).values()
    return any(a == b for a, b in pairwise(digits))


def count_passwords(low: int, high: int, strict: bool = False) -> int:
    """Count the valid numbers from ``low`` up to, but not including, ``high``."""
    return sum(is_valid(number, strict) for number in range(low, high))


def solve(low: int = PUZZLE_LOW, high: int = PUZZLE_HIGH) -> tuple[int, int]:
    """Return the counts under the plain and the strict rule."""
    return count_passwords(low, high, False), count_passwords(low, high, True)