"""Stream processing: nested groups and garbage."""

from __future__ import annotations

import re
from typing import NamedTuple

_IGNORED = re.compile(r"!.")
_GARBAGE = re.compile(r"<[^>]*>")


class StreamScore(NamedTuple):
    """The total group score and the number of garbage characters."""

    groups: int
    garbage: int


def stream_scores(text: str) -> StreamScore:
    """Score every group by its depth and count the characters inside garbage."""
    cleaned = _IGNORED.sub("", text)
    garbage = sum(len(match.group()) - 2 for match in _GARBAGE.finditer(cleaned))
    depth = score = 0
    for char in _GARBAGE.sub("", cleaned):
        if char == "{":
            depth += 1
            score += depth
        elif char == "}":
            depth -= 1
    return StreamScore(score, garbage)


def solve(text: str) -> tuple[int, int]:
    """Return the group score and the garbage count."""
    groups, garbage = stream_scores(text)
    return groups, garbage