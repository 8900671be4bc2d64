"""Spiral memory: distances and neighbour sums on a square spiral."""

from __future__ import annotations

PUZZLE_INPUT = 312051


def spiral_location(n: int) -> tuple[int, int]:
    """Return the (x, y) position of square ``n``; square 1 is at the origin, y grows downward."""
    if n < 1:
        raise ValueError("squares are numbered from 1")
    edge = 1
    while edge * edge < n:
        edge += 2
    mid = edge // 2 + 1
    diff = n - (edge - 2) ** 2
    side = edge - 1
    if diff < side:
        x, y = edge, edge - diff
    elif diff < 2 * side:
        x, y = edge - (diff - side), 1
    elif diff < 3 * side:
        x, y = 1, diff - 2 * side + 1
    else:
        x, y = diff - 3 * side + 1, edge
    return x - mid, y - mid


def distance(n: int) -> int:
    """Return the Manhattan distance from square ``n`` to square 1."""
    x, y = spiral_location(n)
    return abs(x) + abs(y)


def first_larger_sum(n: int) -> int:
    """Return the first neighbour-sum value written that is larger than ``n``.

    Squares up to ``n`` are filled; if none exceeds ``n`` the last value written is returned.
    """
    values = {(0, 0): 1}
    value = 0
    for square in range(2, n + 1):
        x, y = spiral_location(square)
        value = sum(
            values.get((x + dx, y + dy), 0) for dx in (-1, 0, 1) for dy in (-1, 0, 1)
        )
        values[(x, y)] = value
        if value > n:
            break
    return value


def solve(n: int = PUZZLE_INPUT) -> tuple[int, int]:
    """Return the distance of square ``n`` and the first sum larger than ``n``."""
    return distance(n), first_larger_sum(n)