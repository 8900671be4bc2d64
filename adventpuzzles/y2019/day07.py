"""Amplification circuit with a feedback loop."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from itertools import chain, permutations

from adventpuzzles.intcode import Program

FEEDBACK_PHASES = (5, 6, 7, 8, 9)


def _parse(program: str | Iterable[int]) -> list[int]:
    if isinstance(program, str):
        return [int(field) for field in program.strip().split(",")]
    return list(program)


def amplify_feedback(program: str | Iterable[int], phases: Iterable[int]) -> int:
    """Run amplifiers in a loop with the given phases; return the last output of the last one.

    The first amplifier receives 0 after its phase, then the last amplifier's outputs.
    Raises EOFError when an amplifier waits for input that never comes.
    """
    code = _parse(program)
    settings = list(phases)
    if not settings:
        raise ValueError("at least one phase setting is needed")
    feedback: deque[int] = deque([0])

    def looped() -> Iterator[int]:
        while feedback:
            yield feedback.popleft()

    signal: Iterator[int] = looped()
    for phase in settings:
        signal = Program(code).run(chain([phase], signal))
    last = 0
    for last in signal:
        feedback.append(last)
    return last


def max_feedback_signal(program: str | Iterable[int]) -> int:
    """Return the highest signal over every ordering of the phases 5 to 9."""
    code = _parse(program)
    return max(amplify_feedback(code, order) for order in permutations(FEEDBACK_PHASES))


def solve(program: str | Iterable[int]) -> int:
    """Return the highest signal the feedback loop can send to the thrusters."""
    return max_feedback_signal(program)