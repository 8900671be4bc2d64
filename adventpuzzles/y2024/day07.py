"""Bridge repair: operators between numbers."""

from __future__ import annotations

from collections.abc import Sequence


def parse_equation(line: str) -> tuple[int, list[int]]:
    """Parse ``190: 10 19`` into the target and the operands."""
    target, separator, rest = line.partition(": ")
    if not separator:
        raise ValueError(f"malformed equation: {line!r}")
    return int(target), [int(field) for field in rest.split()]


def _concat(a: int, b: int) -> int:
    return int(f"{a}{b}")


def can_solve(operands: Sequence[int], target: int, concat: bool = False) -> bool:
    """Whether adding or multiplying left to right (and concatenating, if allowed) hits the target."""
    if not operands:
        raise ValueError("an equation needs at least one operand")
    values = {operands[0]}
    for operand in operands[1:]:
        following = set()
        for value in values:
            following.add(value + operand)
            following.add(value * operand)
            if concat:
                following.add(_concat(value, operand))
        values = following
    return target in values


def solve(text: str) -> tuple[int, int]:
    """Sum the targets reachable with two operators, and with concatenation too."""
    plain = extended = 0
    for line in text.splitlines():
        if not line.strip():
            continue
        target, operands = parse_equation(line.strip())
        if can_solve(operands, target, False):
            plain += target
        if can_solve(operands, target, True):
            extended += target
    return plain, extended