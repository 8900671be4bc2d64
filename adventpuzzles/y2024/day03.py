"""Mull it over: multiplications hidden in corrupted memory."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_ALL = re.compile(r"(do)\(\)|(don't)\(\)|(mul)\(([0-9]+),([0-9]+)\)")
_OPS = re.compile(r"(do|don't|mul)\((([0-9]+),([0-9]+))?\)")


def sum_muls(program: str) -> int:
    """Sum the products of every well-formed ``mul(a,b)``."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(program))


def sum_enabled_muls(program: str) -> int:
    """Sum the products, skipping those after ``don't()`` until the next ``do()``."""
    total = 0
    enabled = True
    for match in _ALL.finditer(program):
        if match.group(1):
            enabled = True
        elif match.group(2):
            enabled = False
        elif enabled:
            total += int(match.group(4)) * int(match.group(5))
    return total


def sum_ops(program: str) -> int:
    """Like :func:`sum_enabled_muls`, but with one pattern for all operations.

    The pattern also accepts operations with or without arguments; an enabled
    ``mul()`` without arguments raises ValueError.
    """
    total = 0
    enabled = True
    for match in _OPS.finditer(program):
        name = match.group(1)
        if name == "do":
            enabled = True
        elif name == "don't":
            enabled = False
        elif enabled:
            if match.group(2) is None:
                raise ValueError(f"mul without arguments at {match.start()}")
            total += int(match.group(3)) * int(match.group(4))
    return total


def solve(text: str) -> tuple[int, int, int]:
    """Return the plain sum, the enabled sum and the enabled sum by the single pattern."""
    return sum_muls(text), sum_enabled_muls(text), sum_ops(text)