"""Flawed frequency transmission."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate

PHASES = 100
REPEAT = 10_000
OFFSET_DIGITS = 7
MESSAGE_LENGTH = 8


def _digits(text: str) -> list[int]:
    text = text.strip()
    if not text.isdigit():
        raise ValueError("the signal must consist of digits only")
    return [int(char) for char in text]


def fft_phase(signal: Sequence[int]) -> list[int]:
    """Apply one phase: each output digit weighs the input by the repeating 0, 1, 0, -1 pattern."""
    digits = list(signal)
    size = len(digits)
    prefix = [0, *accumulate(digits)]

    def span(start: int, stop: int) -> int:
        return prefix[min(stop, size)] - prefix[min(start, size)]

    result = []
    for index in range(size):
        period = index + 1
        total = 0
        for start in range(index, size, 4 * period):
            total += span(start, start + period) - span(start + 2 * period, start + 3 * period)
        result.append(abs(total) % 10)
    return result


def fft(signal: Sequence[int], phases: int = PHASES) -> list[int]:
    """Apply ``phases`` phases to the signal."""
    if phases < 0:
        raise ValueError("the number of phases must not be negative")
    digits = list(signal)
    for _ in range(phases):
        digits = fft_phase(digits)
    return digits


def decode_message(text: str) -> str:
    """Return the eight-digit message in the signal repeated ten thousand times.

    The offset in the first seven digits must fall in the second half of the signal.
    """
    digits = _digits(text)
    if len(digits) < OFFSET_DIGITS:
        raise ValueError("the signal is too short to hold an offset")
    offset = int("".join(map(str, digits[:OFFSET_DIGITS])))
    total = len(digits) * REPEAT
    if 2 * offset < total or offset + MESSAGE_LENGTH > total:
        raise ValueError(f"offset {offset} is not in the second half of the signal")
    tail = [digits[position % len(digits)] for position in range(offset, total)]
    for _ in range(PHASES):
        tail = list(accumulate(reversed(tail), lambda a, b: (a + b) % 10))[::-1]
    return "".join(map(str, tail[:MESSAGE_LENGTH]))


def solve(text: str) -> tuple[str, str]:
    """Return the first eight digits after 100 phases and the embedded message."""
    first = fft(_digits(text), PHASES)[:MESSAGE_LENGTH]
    return "".join(map(str, first)), decode_message(text)