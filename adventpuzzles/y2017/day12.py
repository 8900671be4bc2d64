"""Groups of programs connected by pipes."""

from __future__ import annotations

from adventpuzzles.graph import node_sets, parse_edges


def solve(text: str) -> tuple[int | None, int]:
    """Return the size of the group holding program ``0`` and the number of groups."""
    groups = node_sets(parse_edges(text.splitlines()))
    zero_group = next((len(group) for group in groups if "0" in group), None)
    return zero_group, len(groups)