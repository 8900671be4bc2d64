"""The tyranny of the rocket equation: fuel for modules."""

from __future__ import annotations


def fuel(mass: int) -> int:
    """Return the fuel a mass needs on its own; it may be zero or negative for tiny masses."""
    return mass // 3 - 2


def total_fuel(mass: int) -> int:
    """Return the fuel for a mass, counting the fuel needed to carry that fuel too."""
    total = 0
    extra = fuel(mass)
    while extra > 0:
        total += extra
        extra = fuel(extra)
    return total


def solve(text: str) -> tuple[int, int]:
    """Return the plain fuel sum and the sum that includes the fuel's own fuel."""
    masses = [int(field) for field in text.split()]
    return sum(map(fuel, masses)), sum(map(total_fuel, masses))