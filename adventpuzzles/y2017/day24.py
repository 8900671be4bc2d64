"""Electromagnetic moat: building bridges from two-sided components."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Component:
    """A component with two connectors, each with its own pin count."""

    a: int
    b: int


def parse_components(text: str) -> list[Component]:
    """Parse ``a/b`` lines into components."""
    components = []
    for line in text.splitlines():
        if not line.strip():
            continue
        first, separator, second = line.strip().partition("/")
        if not separator:
            raise ValueError(f"malformed component: {line!r}")
        components.append(Component(int(first), int(second)))
    return components


def strongest(
    components: Sequence[Component], pin: int = 0, longest: bool = False
) -> tuple[int, int]:
    """Return the strength and length of the best bridge starting at ``pin``.

    Without ``longest`` the strongest bridge wins. With ``longest`` a bridge
    only replaces the current best when it is both stronger and longer.
    """
    parts = list(components)
    used = [False] * len(parts)

    def search(open_pin: int, strength: int, length: int) -> tuple[int, int]:
        best_strength, best_length = strength, length
        for index, part in enumerate(parts):
            if used[index]:
                continue
            if part.a == open_pin:
                other = part.b
            elif part.b == open_pin:
                other = part.a
            else:
                continue
            used[index] = True
            found_strength, found_length = search(
                other, strength + part.a + part.b, length + 1
            )
            used[index] = False
            if found_strength > best_strength and (not longest or found_length > best_length):
                best_strength, best_length = found_strength, found_length
        return best_strength, best_length

    return search(pin, 0, 0)


def solve(text: str) -> tuple[int, int, int]:
    """Return the strongest bridge's strength, and the longest bridge's strength and length."""
    components = parse_components(text)
    strength, _ = strongest(components, 0, False)
    long_strength, long_length = strongest(components, 0, True)
    return strength, long_strength, long_length