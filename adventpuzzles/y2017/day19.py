"""A series of tubes: following a routing diagram."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class Direction(Enum):
    """A direction of travel as a (row, column) offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def perpendicular(self) -> tuple[Direction, Direction]:
        """Return the two directions at right angles to this one."""
        if self in (Direction.UP, Direction.DOWN):
            return Direction.LEFT, Direction.RIGHT
        return Direction.UP, Direction.DOWN

    def step(self, row: int, col: int) -> tuple[int, int]:
        drow, dcol = self.value
        return row + drow, col + dcol


def follow(diagram: Sequence[str]) -> tuple[str, int]:
    """Follow the path from the top row; return the letters seen and the steps taken."""
    rows = list(diagram)
    if not rows:
        raise ValueError("the diagram is empty")
    width = max(map(len, rows))
    grid = [row.ljust(width) for row in rows]
    entries = [col for col, char in enumerate(grid[0]) if char != " "]
    if not entries:
        raise ValueError("the top row has no entry point")

    def inside(r: int, c: int) -> bool:
        return 0 <= r < len(grid) and 0 <= c < width

    def advance(r: int, c: int, d: Direction) -> tuple[int, int]:
        nr, nc = d.step(r, c)
        if not inside(nr, nc):
            raise ValueError(f"the path leaves the diagram at {nr},{nc}")
        return nr, nc

    direction = Direction.DOWN
    row, col = advance(0, entries[-1], direction)
    letters: list[str] = []
    steps = 0
    while (char := grid[row][col]) != " ":
        steps += 1
        if char == "+":
            first, second = direction.perpendicular()
            r, c = first.step(row, col)
            direction = first if inside(r, c) and grid[r][c] != " " else second
        elif char not in "-|":
            letters.append(char)
        row, col = advance(row, col, direction)
    return "".join(letters), steps + 1


def solve(text: str) -> tuple[str, int]:
    """Return the letters along the path and the number of steps."""
    return follow(text.splitlines())