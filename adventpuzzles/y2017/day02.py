"""Corruption checksum over rows of numbers."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def parse_rows(text: str) -> list[list[int]]:
    """Split text into rows of whitespace-separated integers; blank lines are skipped."""
    return [[int(field) for field in line.split()] for line in text.splitlines() if line.strip()]


def row_range(row: Sequence[int]) -> int:
    """Return the difference between the largest and smallest value of a row."""
    if not row:
        raise ValueError("an empty row has no range")
    return max(row) - min(row)


def even_division(row: Sequence[int]) -> int:
    """Return the quotient of the only two values in the row that divide evenly."""
    for small, large in combinations(sorted(row), 2):
        if large % small == 0:
            return large // small
    raise ValueError(f"no two values in {list(row)} divide evenly")


def solve(text: str) -> tuple[int, int]:
    """Return the sum of row ranges and the sum of even divisions."""
    rows = parse_rows(text)
    return sum(map(row_range, rows)), sum(map(even_division, rows))