"""Knot hashing of a list of lengths."""

from __future__ import annotations

from adventpuzzles.knothash import LIST_SIZE, knot_hash, sparse

PUZZLE_INPUT = "97,167,54,178,2,11,209,174,119,248,254,0,255,1,64,190"


def solve(text: str = PUZZLE_INPUT) -> tuple[int, str]:
    """Return the product of the first two values after one round, and the full hash."""
    text = text.strip()
    lengths = [int(part) for part in text.split(",")]
    values = sparse(range(LIST_SIZE), lengths, 1)
    return values[0] * values[1], knot_hash(text)