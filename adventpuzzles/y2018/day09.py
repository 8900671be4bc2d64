"""Marble mania: a circular marble game."""

from __future__ import annotations

from collections import deque

PUZZLE_PLAYERS = 412
PUZZLE_MARBLES = 71646


def high_score(players: int, marbles: int) -> int:
    """Return the winning score after ``marbles`` marbles with ``players`` players."""
    if players < 1:
        raise ValueError("there must be at least one player")
    if marbles < 0:
        raise ValueError("the number of marbles must not be negative")
    scores = [0] * players
    circle = deque([0])
    for marble in range(1, marbles + 1):
        if marble % 23:
            circle.rotate(-1)
            circle.append(marble)
        else:
            circle.rotate(7)
            scores[(marble - 1) % players] += marble + circle.pop()
            circle.rotate(-1)
    return max(scores)