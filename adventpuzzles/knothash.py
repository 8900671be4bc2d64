"""The knot hash: a circular-list twisting hash."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor

LIST_SIZE = 256
ROUNDS = 64
SUFFIX = (17, 31, 73, 47, 23)
BLOCK_SIZE = 16


def sparse(values: Iterable[int], lengths: Sequence[int], rounds: int = 1) -> list[int]:
    """Twist a circular list by the given lengths, keeping position and skip across rounds."""
    circle = list(values)
    size = len(circle)
    if not circle:
        return circle
    offset = 0
    skip = 0
    for _ in range(rounds):
        for length in lengths:
            if not 0 <= length <= size:
                raise ValueError(f"length {length} does not fit a list of {size}")
            circle[:length] = reversed(circle[:length])
            step = (length + skip) % size
            circle = circle[step:] + circle[:step]
            offset = (offset + step) % size
            skip += 1
    return circle[size - offset:] + circle[:size - offset]


def dense(values: Sequence[int]) -> list[int]:
    """XOR each block of sixteen values into one."""
    if len(values) % BLOCK_SIZE:
        raise ValueError("the list length must be a multiple of 16")
    blocks = zip(*[iter(values)] * BLOCK_SIZE)
    return [reduce(xor, block) for block in blocks]


def to_hex(values: Iterable[int]) -> str:
    """Render byte values as lower-case hexadecimal, two digits each."""
    return "".join(f"{value:02x}" for value in values)


def knot_hash(text: str) -> str:
    """Return the 32-digit hexadecimal knot hash of ``text``."""
    lengths = [ord(char) for char in text] + list(SUFFIX)
    return to_hex(dense(sparse(range(LIST_SIZE), lengths, ROUNDS)))