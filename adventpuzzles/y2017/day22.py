"""Sporifica virus: a carrier infecting a grid."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum

BURSTS_A = 10_000
BURSTS_B = 10_000_000

# up, right, down, left: turning right adds one
_HEADINGS = ((-1, 0), (0, 1), (1, 0), (0, -1))


class Infection(IntEnum):
    """The state of one node."""

    CLEAN = 0
    WEAKENED = 1
    INFECTED = 2
    FLAGGED = 3

    def evolve(self, rate: int) -> Infection:
        return Infection((self + rate) % 4)


Grid = dict[tuple[int, int], Infection]


def parse_grid(text: str) -> Grid:
    """Parse the map with the middle node at (0, 0); rows grow downward."""
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("the map is empty")
    row_offset = len(lines) // 2
    col_offset = len(lines[0]) // 2
    return {
        (i - row_offset, j - col_offset): Infection.INFECTED if char == "#" else Infection.CLEAN
        for i, line in enumerate(lines)
        for j, char in enumerate(line)
    }


def infect(grid: Mapping[tuple[int, int], Infection], bursts: int, evolved: bool = False) -> int:
    """Run the carrier for ``bursts`` bursts and count the bursts that cause an infection.

    The given grid is left unchanged.
    """
    nodes: Grid = dict(grid)
    rate = 1 if evolved else 2
    heading = 0
    row = col = 0
    infections = 0
    for _ in range(bursts):
        state = nodes.get((row, col), Infection.CLEAN)
        if state is Infection.INFECTED:
            heading = (heading + 1) % 4
        elif state is Infection.FLAGGED:
            heading = (heading + 2) % 4
        elif state is Infection.WEAKENED:
            if evolved:
                infections += 1
        else:
            heading = (heading - 1) % 4
            if not evolved:
                infections += 1
        nodes[(row, col)] = state.evolve(rate)
        drow, dcol = _HEADINGS[heading]
        row, col = row + drow, col + dcol
    return infections


def solve(text: str) -> tuple[int, int]:
    """Return the infections caused by the simple and by the evolved virus."""
    grid = parse_grid(text)
    return infect(grid, BURSTS_A, False), infect(grid, BURSTS_B, True)