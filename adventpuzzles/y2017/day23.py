"""Coprocessor conflagration: counting multiplications and non-primes."""

from __future__ import annotations

from math import isqrt

from adventpuzzles.cpu import CPU, load_program

_SEED = 79
_STRIDE = 17
_SPAN = 17_000


def _has_divisor(n: int) -> bool:
    return any(n % d == 0 for d in range(2, isqrt(n) + 1))


def count_nonprimes() -> int:
    """Count the composite numbers the optimised program would visit."""
    start = _SEED * 100 + 100_000
    stop = start + _SPAN
    return sum(1 for b in range(start, stop + 1, _STRIDE) if _has_divisor(b))


def solve(text: str) -> tuple[int, int]:
    """Return how often ``mul`` runs in the program, and the non-prime count."""
    cpu = CPU(load_program(text.splitlines()), debug=True)
    cpu.execute()
    return cpu.counts["mul"], count_nonprimes()