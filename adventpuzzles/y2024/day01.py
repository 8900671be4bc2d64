"""Historian hysteria: comparing two lists of location ids."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split lines of two whitespace-separated numbers into a left and a right list."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"expected two numbers on a line: {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Pair the lists smallest with smallest and sum the differences of each pair."""
    if len(left) != len(right):
        raise ValueError("the lists differ in length")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum each left value times the number of times it occurs in the right list."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def solve(text: str) -> tuple[int, int]:
    """Return the total distance and the similarity score of the two lists."""
    left, right = parse_lists(text)
    return total_distance(left, right), similarity(left, right)