"""Dueling generators and their judge."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice

MODULUS = 2147483647
FACTOR_A = 16807
FACTOR_B = 48271
PICKY_A = 4
PICKY_B = 8
PUZZLE_START_A = 516
PUZZLE_START_B = 190
PAIRS_PLAIN = 40_000_000
PAIRS_PICKY = 5_000_000

_MASK = 0xFFFF


def generator(start: int, factor: int, multiple: int = 0) -> Iterator[int]:
    """Yield the generator's values; with a non-zero ``multiple`` only its multiples."""
    if multiple < 0:
        raise ValueError("the multiple must not be negative")

    def values() -> Iterator[int]:
        value = start
        while True:
            value = value * factor % MODULUS
            if multiple and value % multiple:
                continue
            yield value

    return values()


def judge(gen_a: Iterator[int], gen_b: Iterator[int], pairs: int) -> int:
    """Count the pairs whose lowest 16 bits agree among the next ``pairs`` pairs."""
    if pairs < 0:
        raise ValueError("the number of pairs must not be negative")
    return sum(1 for a, b in islice(zip(gen_a, gen_b), pairs) if a & _MASK == b & _MASK)


def solve(start_a: int = PUZZLE_START_A, start_b: int = PUZZLE_START_B) -> tuple[int, int]:
    """Return the judge's count for the plain and for the picky generators."""
    plain = judge(generator(start_a, FACTOR_A), generator(start_b, FACTOR_B), PAIRS_PLAIN)
    picky = judge(
        generator(start_a, FACTOR_A, PICKY_A),
        generator(start_b, FACTOR_B, PICKY_B),
        PAIRS_PICKY,
    )
    return plain, picky