"""The Halting Problem: a Turing machine with a fixed blueprint."""

from __future__ import annotations

from collections import defaultdict

PUZZLE_STEPS = 12_683_008

LEFT, RIGHT = -1, 1

# state -> (action when reading 0, action when reading 1); action = (write, move, next state)
_BLUEPRINT: dict[str, tuple[tuple[int, int, str], tuple[int, int, str]]] = {
    "A": ((1, RIGHT, "B"), (0, LEFT, "B")),
    "B": ((1, LEFT, "C"), (0, RIGHT, "E")),
    "C": ((1, RIGHT, "E"), (0, LEFT, "D")),
    "D": ((1, LEFT, "A"), (1, LEFT, "A")),
    "E": ((0, RIGHT, "A"), (0, RIGHT, "F")),
    "F": ((1, RIGHT, "E"), (1, RIGHT, "A")),
}


class Tape:
    """An infinite tape of zeros with a head and the machine's current state."""

    def __init__(self) -> None:
        self.cells: defaultdict[int, int] = defaultdict(int)
        self.position = 0
        self.state = "A"

    def step(self) -> None:
        """Perform one step of the blueprint."""
        write, move, following = _BLUEPRINT[self.state][self.cells[self.position]]
        self.cells[self.position] = write
        self.position += move
        self.state = following

    def ones(self) -> int:
        """Count the ones on the tape."""
        return sum(1 for value in self.cells.values() if value == 1)


def run(steps: int = PUZZLE_STEPS) -> int:
    """Run the machine for ``steps`` steps and return the diagnostic checksum."""
    if steps < 0:
        raise ValueError("the number of steps must not be negative")
    tape = Tape()
    for _ in range(steps):
        tape.step()
    return tape.ones()