"""Permutation promenade: dancing programs."""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping
from dataclasses import dataclass

PROGRAMS = "abcdefghijklmnop"
ROUNDS = 1_000_000_000


@dataclass(frozen=True)
class Spin:
    """Move the last ``size`` programs to the front."""

    size: int

    def apply(self, positions: MutableMapping[str, int]) -> None:
        count = len(positions)
        for name, position in positions.items():
            positions[name] = (position + self.size) % count


@dataclass(frozen=True)
class Exchange:
    """Swap the programs standing at two positions."""

    first: int
    second: int

    def apply(self, positions: MutableMapping[str, int]) -> None:
        names = {position: name for name, position in positions.items()}
        try:
            a, b = names[self.first], names[self.second]
        except KeyError:
            raise ValueError(f"no program at position in {self}") from None
        positions[a], positions[b] = self.second, self.first


@dataclass(frozen=True)
class Partner:
    """Swap two programs by name."""

    first: str
    second: str

    def apply(self, positions: MutableMapping[str, int]) -> None:
        try:
            a, b = positions[self.first], positions[self.second]
        except KeyError:
            raise ValueError(f"unknown program in {self}") from None
        positions[self.first], positions[self.second] = b, a


Move = Spin | Exchange | Partner


def parse_moves(text: str) -> list[Move]:
    """Parse comma-separated moves such as ``s1,x3/4,pe/b``."""
    moves: list[Move] = []
    for raw in text.strip().split(","):
        raw = raw.strip()
        if not raw:
            continue
        kind, rest = raw[0], raw[1:]
        try:
            if kind == "s":
                moves.append(Spin(int(rest)))
            elif kind == "x":
                a, b = rest.split("/")
                moves.append(Exchange(int(a), int(b)))
            elif kind == "p":
                a, b = rest.split("/")
                moves.append(Partner(a, b))
            else:
                raise ValueError(f"unknown move {raw!r}")
        except ValueError as error:
            raise ValueError(f"malformed move {raw!r}") from error
    return moves


def _lineup(positions: MutableMapping[str, int]) -> str:
    return "".join(sorted(positions, key=positions.__getitem__))


def dance(positions: MutableMapping[str, int], moves: Iterable[Move]) -> str:
    """Apply every move to ``positions`` in place and return the resulting line-up."""
    for move in moves:
        move.apply(positions)
    return _lineup(positions)


def solve(text: str, programs: str = PROGRAMS, rounds: int = ROUNDS) -> tuple[str, str]:
    """Return the line-up after one dance and after ``rounds`` dances."""
    moves = parse_moves(text)
    positions = {name: index for index, name in enumerate(programs)}
    states: list[str] = []
    seen: dict[str, int] = {}
    state = _lineup(positions)
    while state not in seen:
        seen[state] = len(states)
        states.append(state)
        state = dance(positions, moves)
    start = seen[state]
    period = len(states) - start

    def after(n: int) -> str:
        if n < len(states):
            return states[n]
        return states[start + (n - start) % period]

    return after(1), after(rounds)