"""A maze of twisty trampolines: jump offsets."""

from __future__ import annotations

from collections.abc import Iterable


def count_steps(jumps: Iterable[int], strange: bool = False) -> int:
    """Count the jumps needed to leave the list; the input is not modified.

    After each jump the offset grows by one, or with ``strange`` shrinks by one
    when it was three or more.
    """
    offsets = list(jumps)
    ip = steps = 0
    while 0 <= ip < len(offsets):
        offset = offsets[ip]
        offsets[ip] += -1 if strange and offset >= 3 else 1
        ip += offset
        steps += 1
    return steps


def solve(text: str) -> tuple[int, int]:
    """Return the step counts under both offset rules."""
    jumps = [int(field) for field in text.split()]
    return count_steps(jumps, False), count_steps(jumps, True)