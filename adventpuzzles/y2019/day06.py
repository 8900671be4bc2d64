"""Universal orbit map."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def parse_orbits(lines: Iterable[str]) -> dict[str, str]:
    """Parse ``A)B`` lines into a map from each satellite to the object it orbits."""
    parents: dict[str, str] = {}
    for line in lines:
        line = line.strip()
        if not line:
            continue
        center, separator, satellite = line.partition(")")
        if not separator or not center or not satellite:
            raise ValueError(f"malformed orbit: {line!r}")
        parents[satellite] = center
    return parents


def _ancestors(parents: Mapping[str, str], name: str) -> list[str]:
    """Return the objects ``name`` orbits, outermost first."""
    chain: list[str] = []
    seen = {name}
    node = name
    while node in parents:
        node = parents[node]
        if node in seen:
            raise ValueError(f"orbits form a cycle through {node!r}")
        seen.add(node)
        chain.append(node)
    chain.reverse()
    return chain


def count_orbits(parents: Mapping[str, str]) -> int:
    """Return the total number of direct and indirect orbits."""
    depths: dict[str, int] = {}
    limit = len(parents)

    def depth(name: str) -> int:
        path: list[str] = []
        node = name
        while node in parents and node not in depths:
            path.append(node)
            if len(path) > limit:
                raise ValueError(f"orbits form a cycle through {name!r}")
            node = parents[node]
        value = depths.get(node, 0)
        for item in reversed(path):
            value += 1
            depths[item] = value
        return depths.get(name, 0)

    return sum(depth(name) for name in parents)


def transfers(parents: Mapping[str, str], start: str, end: str) -> int:
    """Return the orbital transfers between the objects ``start`` and ``end`` orbit."""
    for name in (start, end):
        if name not in parents:
            raise ValueError(f"unknown object {name!r}")
    first = _ancestors(parents, start)
    second = _ancestors(parents, end)
    common = 0
    for a, b in zip(first, second):
        if a != b:
            break
        common += 1
    return len(first) + len(second) - 2 * common


def solve(text: str) -> tuple[int, int]:
    """Return the orbit count and the transfers from YOU to SAN."""
    parents = parse_orbits(text.splitlines())
    return count_orbits(parents), transfers(parents, "YOU", "SAN")