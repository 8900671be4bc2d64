"""Undirected connection lists and their connected groups."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence


def parse_edges(lines: Iterable[str]) -> dict[str, list[str]]:
    """Parse lines of the form ``a <-> b, c`` into a node-to-neighbours map."""
    edges: dict[str, list[str]] = {}
    for line in lines:
        origin, separator, targets = line.partition(" <-> ")
        if not separator:
            raise ValueError(f"malformed edge line: {line!r}")
        edges[origin] = targets.split(", ")
    return edges


def node_sets(edges: Mapping[str, Sequence[str]]) -> list[set[str]]:
    """Return the groups of nodes reachable from each other.

    Groups are listed in the order their first node appears in ``edges``.
    """
    groups: list[set[str]] = []
    for origin in edges:
        if any(origin in group for group in groups):
            continue
        group = {origin}
        pending = [origin]
        while pending:
            node = pending.pop()
            for neighbour in edges.get(node, ()):
                if neighbour not in group:
                    group.add(neighbour)
                    pending.append(neighbour)
        groups.append(group)
    return groups