"""Chronal calibration: frequency changes."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def final_frequency(changes: Sequence[int]) -> int:
    """Return the frequency after applying every change once, starting at 0."""
    return sum(changes)


def first_repeat(changes: Sequence[int]) -> int:
    """Return the first frequency reached twice when the changes repeat forever.

    The starting frequency 0 does not count as reached. Raises ValueError when
    no frequency would ever repeat.
    """
    if not changes:
        raise ValueError("there are no changes")
    seen: set[int] = set()
    partials = list(accumulate(changes))
    for total in partials:
        if total in seen:
            return total
        seen.add(total)
    drift = partials[-1]
    if drift != 0:
        residues = {total % abs(drift) for total in partials}
        if len(residues) == len(partials):
            raise ValueError("no frequency is ever reached twice")
    total = drift
    while True:
        for change in changes:
            total += change
            if total in seen:
                return total
            seen.add(total)


def solve(text: str) -> tuple[int, int]:
    """Return the final frequency and the first repeated one."""
    changes = [int(field) for field in text.split()]
    return final_frequency(changes), first_repeat(changes)