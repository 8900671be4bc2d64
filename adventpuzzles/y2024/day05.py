"""Print queue: page ordering rules."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from functools import cmp_to_key

Rules = Mapping[int, Sequence[int]]


def parse_manual(lines: Iterable[str]) -> tuple[dict[int, list[int]], list[list[int]]]:
    """Parse ``a|b`` rules, a blank line, then comma-separated updates.

    The rules map each page to the pages that must come after it.
    """
    rules: dict[int, list[int]] = {}
    updates: list[list[int]] = []
    in_rules = True
    for line in lines:
        line = line.strip()
        if not line:
            in_rules = False
            continue
        if in_rules:
            before, separator, after = line.partition("|")
            if not separator:
                raise ValueError(f"malformed rule: {line!r}")
            rules.setdefault(int(before), []).append(int(after))
        else:
            updates.append([int(page) for page in line.split(",")])
    return rules, updates


def is_correctly_ordered(update: Sequence[int], rules: Rules) -> bool:
    """No page is printed after a page that a rule says must follow it."""
    for index, page in enumerate(update):
        earlier = update[:index]
        if any(after in earlier for after in rules.get(page, ())):
            return False
    return True


def reorder(update: Sequence[int], rules: Rules) -> list[int]:
    """Return the update sorted by the rules."""

    def compare(a: int, b: int) -> int:
        if b in rules.get(a, ()):
            return -1
        if a in rules.get(b, ()):
            return 1
        return 0

    return sorted(update, key=cmp_to_key(compare))


def solve(text: str) -> tuple[int, int]:
    """Sum the middle pages of correct updates, and of the incorrect ones once reordered."""
    rules, updates = parse_manual(text.splitlines())
    correct = corrected = 0
    for update in updates:
        if is_correctly_ordered(update, rules):
            correct += update[len(update) // 2]
        else:
            corrected += reorder(update, rules)[len(update) // 2]
    return correct, corrected