"""No matter how you slice it: overlapping fabric claims."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_CLAIM = re.compile(r"^#(\d+) @ (\d+),(\d+): (\d+)x(\d+)$")


@dataclass(frozen=True)
class Claim:
    """A rectangle of fabric claimed by an elf."""

    id: int
    x: int
    y: int
    w: int
    h: int

    def squares(self) -> Iterator[tuple[int, int]]:
        for i in range(self.x, self.x + self.w):
            for j in range(self.y, self.y + self.h):
                yield i, j


def parse_claim(line: str) -> Claim:
    """Parse ``#1 @ 1,3: 4x4``."""
    match = _CLAIM.match(line.strip())
    if match is None:
        raise ValueError(f"malformed claim: {line!r}")
    return Claim(*(int(group) for group in match.groups()))


class Fabric:
    """How many claims cover each square inch."""

    def __init__(self) -> None:
        self.marks: Counter[tuple[int, int]] = Counter()

    def claim(self, claim: Claim) -> None:
        """Mark every square of the claim."""
        self.marks.update(claim.squares())

    def overlapping(self) -> int:
        """Count the square inches claimed more than once."""
        return sum(1 for count in self.marks.values() if count > 1)

    def freestanding(self, claims: Iterable[Claim]) -> int | None:
        """Return the id of the first claim overlapping no other, or None."""
        for claim in claims:
            if all(self.marks[square] <= 1 for square in claim.squares()):
                return claim.id
        return None


def solve(text: str) -> tuple[int, int | None]:
    """Return the overlapping area and the id of the claim that stands alone."""
    claims = [parse_claim(line) for line in text.splitlines() if line.strip()]
    fabric = Fabric()
    for claim in claims:
        fabric.claim(claim)
    return fabric.overlapping(), fabric.freestanding(claims)