"""Plutonian pebbles: stones that change with every blink."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cache

PUZZLE_INPUT = "5688 62084 2 3248809 179 79 0 172169"
BLINKS_A = 25
BLINKS_B = 75


def _change(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def blink(stones: Iterable[int]) -> list[int]:
    """Return the row of stones after one blink."""
    return [changed for stone in stones for changed in _change(stone)]


@cache
def _count(stone: int, blinks: int) -> int:
    if blinks == 0:
        return 1
    return sum(_count(changed, blinks - 1) for changed in _change(stone))


def count_stones(stone: int, blinks: int) -> int:
    """Return how many stones one stone becomes after ``blinks`` blinks."""
    if blinks < 0:
        raise ValueError("the number of blinks must not be negative")
    return _count(stone, blinks)


def solve(text: str = PUZZLE_INPUT) -> tuple[int, int]:
    """Return the number of stones after 25 and after 75 blinks."""
    stones = [int(field) for field in text.split()]
    row = stones
    for _ in range(BLINKS_A):
        row = blink(row)
    return len(row), sum(count_stones(stone, BLINKS_B) for stone in stones)