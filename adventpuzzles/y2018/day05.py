"""Alchemical reduction of polymers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def encode(polymer: str) -> list[int]:
    """Map each unit to an integer so that both polarities of a type sum to zero.

    ``a`` becomes 1 and ``A`` becomes -1, ``b`` 2 and ``B`` -2, and so on.
    """
    return [64 - ord(char) if ord(char) <= 90 else ord(char) - 96 for char in polymer]


def decode(units: Iterable[int]) -> str:
    """Turn encoded units back into text."""
    return "".join(chr(64 - unit) if unit < 0 else chr(unit + 96) for unit in units)


def react(units: Iterable[int]) -> list[int]:
    """Remove adjacent units of opposite polarity until none are left."""
    stack: list[int] = []
    for unit in units:
        if stack and stack[-1] + unit == 0:
            stack.pop()
        else:
            stack.append(unit)
    return stack


def remove_unit(units: Sequence[int], unit: int) -> list[int]:
    """Drop every unit of the given type, in both polarities."""
    return [value for value in units if value not in (unit, -unit)]


def solve(text: str) -> tuple[int, int]:
    """Return the reacted length and the shortest length after removing one type.

    Surrounding whitespace in ``text`` is ignored.
    """
    units = encode(text.strip())
    reacted = react(units)
    largest = max((abs(unit) for unit in units), default=0)
    shortest = min(
        (len(react(remove_unit(units, unit))) for unit in range(1, largest + 1)),
        default=len(units),
    )
    return len(reacted), min(shortest, len(units))