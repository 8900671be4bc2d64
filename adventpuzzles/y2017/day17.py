"""Spinlock: a circular buffer growing by steps."""

from __future__ import annotations

from collections import deque

PUZZLE_STEP = 349
SHORT_COUNT = 2017
LONG_COUNT = 49_999_999


def _check(step: int, count: int) -> None:
    if step < 0:
        raise ValueError("the step must not be negative")
    if count < 0:
        raise ValueError("the count must not be negative")


def value_after_last(step: int, count: int = SHORT_COUNT) -> int:
    """Insert values 1..count and return the value following the last one inserted."""
    _check(step, count)
    buffer = deque([0])
    for value in range(1, count + 1):
        buffer.rotate(-step)
        buffer.append(value)
    return buffer[0]


def value_after_zero(step: int, count: int = LONG_COUNT) -> int:
    """Insert values 1..count and return the value following 0."""
    _check(step, count)
    position = 0
    after = 0
    for value in range(1, count + 1):
        position = (position + step) % value + 1
        if position == 1:
            after = value
    return after


def solve(step: int = PUZZLE_STEP) -> tuple[int, int]:
    """Return the value after 2017 and the value after 0 once fifty million are in."""
    return value_after_last(step, SHORT_COUNT), value_after_zero(step, LONG_COUNT)