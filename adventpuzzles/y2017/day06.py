"""Memory reallocation between banks."""

from __future__ import annotations

from collections.abc import Sequence

PUZZLE_BANKS = (10, 3, 15, 10, 5, 15, 5, 15, 9, 2, 5, 8, 5, 2, 3, 6)


def redistribute(banks: Sequence[int]) -> tuple[int, ...]:
    """Empty the fullest bank (first on ties) and deal its blocks out one by one."""
    blocks = list(banks)
    if not blocks:
        raise ValueError("there are no banks to redistribute")
    size = len(blocks)
    index = blocks.index(max(blocks))
    count = blocks[index]
    blocks[index] = 0
    for offset in range(1, count + 1):
        blocks[(index + offset) % size] += 1
    return tuple(blocks)


def find_cycle(banks: Sequence[int]) -> tuple[int, int]:
    """Return the number of cycles until a state repeats, and the length of the loop."""
    seen: dict[tuple[int, ...], int] = {}
    state = tuple(banks)
    steps = 0
    while state not in seen:
        seen[state] = steps
        state = redistribute(state)
        steps += 1
    return steps, steps - seen[state]


def solve(banks: Sequence[int] = PUZZLE_BANKS) -> tuple[int, int]:
    """Return the cycles until a repeat and the loop length."""
    return find_cycle(banks)