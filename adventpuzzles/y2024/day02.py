"""Red-nosed reports: steadily rising or falling levels."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def parse_report(line: str) -> list[int]:
    """Parse a line of whitespace-separated levels."""
    fields = line.split()
    if not fields:
        raise ValueError("a report needs at least one level")
    return [int(field) for field in fields]


def _good(diff: int) -> bool:
    return 1 <= diff <= 3


def _direction(levels: Sequence[int]) -> tuple[bool, bool | None]:
    """Return whether the levels are steady, and whether they descend.

    The direction is None when there are fewer than two levels.
    """
    if len(levels) < 2:
        return True, None
    descending = levels[0] > levels[1]
    for a, b in pairwise(levels):
        if (a > b) != descending or not _good(abs(a - b)):
            return False, descending
    return True, descending


def _joins(direction: tuple[bool, bool | None], descending: bool) -> bool:
    ok, trend = direction
    return ok and (trend is None or trend == descending)


def is_safe(levels: Sequence[int]) -> bool:
    """All levels rise or all fall, by one to three at each step."""
    return _direction(levels)[0]


def is_tolerated(levels: Sequence[int]) -> bool:
    """The report is safe, or becomes safe when one level is removed."""
    values = list(levels)
    return is_safe(values) or any(
        is_safe(values[:index] + values[index + 1:]) for index in range(len(values))
    )


def is_safe_without_copy(levels: Sequence[int]) -> bool:
    """Decide tolerance by checking the pieces around each removable level."""
    values = list(levels)
    size = len(values)
    if is_safe(values) or is_safe(values[1:]) or is_safe(values[:-1]):
        return True
    for index in range(1, size - 1):
        before, after = values[index - 1], values[index + 1]
        if not _good(abs(before - after)):
            continue
        descending = before > after
        if index == 1:
            if _joins(_direction(values[index + 1:]), descending):
                return True
        elif index == size - 2:
            if _joins(_direction(values[:index]), descending):
                return True
        else:
            left_ok, left_trend = _direction(values[:index])
            right_ok, right_trend = _direction(values[index + 1:])
            if left_ok and right_ok and left_trend == right_trend == descending:
                return True
    return False


def _trend_sign(levels: Sequence[int]) -> int:
    """Return -1 when most steps rise and 1 otherwise."""
    balance = sum(1 if a < b else -1 for a, b in pairwise(levels))
    return -1 if balance > 0 else 1


def _steady(levels: Sequence[int], sign: int) -> bool:
    return all(_good(sign * (a - b)) for a, b in pairwise(levels))


def is_safe_single_pass(levels: Sequence[int]) -> bool:
    """Decide tolerance in one pass, following the majority trend and skipping one level."""
    values = list(levels)
    sign = _trend_sign(values)
    size = len(values)
    for index in range(size - 1):
        if _good(sign * (values[index] - values[index + 1])):
            continue
        if index + 2 == size:
            return True
        if _good(sign * (values[index] - values[index + 2])):
            return _steady(values[index + 2:], sign)
        if index == 0:
            return _steady(values[1:], sign)
        if _good(sign * (values[index - 1] - values[index + 1])):
            return _steady(values[index + 1:], sign)
        return False
    return True


def solve(text: str) -> tuple[int, int, int, int]:
    """Count safe reports, and tolerated reports by each of the three methods."""
    reports = [parse_report(line) for line in text.splitlines() if line.strip()]
    return (
        sum(map(is_safe, reports)),
        sum(map(is_tolerated, reports)),
        sum(map(is_safe_without_copy, reports)),
        sum(map(is_safe_single_pass, reports)),
    )