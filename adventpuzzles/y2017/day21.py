"""Fractal art: enhancing a pixel grid by rules."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

START = (".#.", "..#", "###")
ITERATIONS_A = 5
ITERATIONS_B = 18


def parse_rules(text: str) -> dict[str, str]:
    """Parse ``pattern => output`` lines."""
    rules: dict[str, str] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        pattern, separator, output = line.strip().partition(" => ")
        if not separator:
            raise ValueError(f"malformed rule: {line!r}")
        rules[pattern] = output
    return rules


def _rotate(rows: Sequence[str]) -> list[str]:
    return ["".join(column) for column in zip(*reversed(rows))]


def _variants(rows: Sequence[str]) -> Iterator[list[str]]:
    for base in (list(rows), list(rows)[::-1]):
        for _ in range(4):
            yield base
            base = _rotate(base)


def expand_rules(rules: Mapping[str, str]) -> dict[str, str]:
    """Add every rotation and flip of each pattern, mapped to the same output."""
    expanded: dict[str, str] = {}
    for pattern, output in rules.items():
        for variant in _variants(pattern.split("/")):
            expanded["/".join(variant)] = output
    return expanded


def enhance(grid: Sequence[str], rules: Mapping[str, str]) -> list[str]:
    """Replace each 2x2 (even sizes) or 3x3 block by the output of its rule."""
    size = len(grid)
    if size % 2 == 0:
        block = 2
    elif size % 3 == 0:
        block = 3
    else:
        raise ValueError(f"a grid of size {size} cannot be split into blocks")
    result: list[str] = []
    for top in range(0, size, block):
        band = grid[top:top + block]
        pieces = []
        for left in range(0, size, block):
            signature = "/".join(row[left:left + block] for row in band)
            try:
                pieces.append(rules[signature].split("/"))
            except KeyError:
                raise ValueError(f"unknown pattern {signature}") from None
        result.extend("".join(parts) for parts in zip(*pieces))
    return result


def count_on(grid: Sequence[str]) -> int:
    """Count the pixels that are on."""
    return sum(row.count("#") for row in grid)


def solve(text: str) -> tuple[int, int]:
    """Return the pixels on after 5 and after 18 iterations."""
    rules = expand_rules(parse_rules(text))
    grid: list[str] = list(START)
    after_a = 0
    for iteration in range(1, ITERATIONS_B + 1):
        grid = enhance(grid, rules)
        if iteration == ITERATIONS_A:
            after_a = count_on(grid)
    return after_a, count_on(grid)