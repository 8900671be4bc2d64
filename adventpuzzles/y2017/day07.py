"""Recursive circus: a tower of discs with one wrong weight."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

_DISC = re.compile(r"^(\S+) \((-?\d+)\)(?: -> (.+))?$")


@dataclass(eq=False)
class Disc:
    """A program standing on a disc, holding up its children."""

    name: str
    weight: int
    child_names: list[str] = field(default_factory=list)
    children: list[Disc] = field(default_factory=list)

    def balance(self) -> tuple[int, int]:
        """Return the total weight and the corrected weight of the one unbalanced disc.

        When an imbalance is found deeper in the tower, the total is 0 and the
        correction is non-zero; a balanced tower gives a correction of 0.
        """
        weights = []
        for child in self.children:
            total, correction = child.balance()
            if correction:
                return 0, correction
            weights.append(total)
        if len(weights) > 1:
            counts = Counter(weights)
            for index, total in enumerate(weights):
                if counts[total] == 1:
                    other = weights[(index + 1) % 2]
                    return 0, self.children[index].weight + other - total
        return sum(weights) + self.weight, 0


def parse_disc(line: str) -> Disc:
    """Parse a line such as ``fwft (72) -> ktlj, cntj``."""
    match = _DISC.match(line.strip())
    if match is None:
        raise ValueError(f"malformed disc line: {line!r}")
    name, weight, children = match.groups()
    return Disc(name, int(weight), children.split(", ") if children else [])


def build_tower(lines: Iterable[str]) -> Disc:
    """Link the discs together and return the one at the bottom."""
    discs = {disc.name: disc for disc in map(parse_disc, filter(str.strip, lines))}
    held: set[str] = set()
    for disc in discs.values():
        for name in disc.child_names:
            if name not in discs:
                raise ValueError(f"unknown disc {name!r} held by {disc.name!r}")
            held.add(name)
            disc.children.append(discs[name])
    roots = [disc for name, disc in discs.items() if name not in held]
    if len(roots) != 1:
        raise ValueError(f"expected one bottom disc, found {len(roots)}")
    return roots[0]


def solve(text: str) -> tuple[str, int]:
    """Return the name of the bottom disc and the weight that fixes the tower."""
    root = build_tower(text.splitlines())
    return root.name, root.balance()[1]