"""Hex grid walking."""

from __future__ import annotations

from collections.abc import Iterable

_MOVES = {
    "n": (0, -1),
    "s": (0, 1),
    "nw": (-1, 0),
    "se": (1, 0),
    "ne": (1, -1),
    "sw": (-1, 1),
}


def hex_distance(x: int, y: int) -> int:
    """Return the number of hex steps from the origin to axial position (x, y)."""
    return (abs(x) + abs(x + y) + abs(y)) // 2


def walk(steps: Iterable[str]) -> tuple[int, int]:
    """Return the final distance from the origin and the furthest distance reached."""
    x = y = distance = furthest = 0
    for step in steps:
        try:
            dx, dy = _MOVES[step]
        except KeyError:
            raise ValueError(f"unknown direction {step!r}") from None
        x, y = x + dx, y + dy
        distance = hex_distance(x, y)
        furthest = max(furthest, distance)
    return distance, furthest


def solve(text: str) -> tuple[int, int]:
    """Walk a comma-separated path and return the final and furthest distances."""
    path = text.strip()
    return walk(path.split(",") if path else [])