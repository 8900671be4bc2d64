"""Space stoichiometry: ore needed for fuel."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Mapping

ORE = "ORE"
FUEL = "FUEL"
ORE_SUPPLY = 1_000_000_000_000

Reactions = Mapping[str, tuple[int, Mapping[str, int]]]


def _chemical(text: str) -> tuple[str, int]:
    amount, separator, name = text.strip().partition(" ")
    if not separator or not name:
        raise ValueError(f"malformed chemical: {text!r}")
    return name, int(amount)


def parse_reactions(lines: Iterable[str]) -> dict[str, tuple[int, dict[str, int]]]:
    """Parse ``7 A, 1 B => 1 C`` lines into output -> (amount made, inputs)."""
    reactions: dict[str, tuple[int, dict[str, int]]] = {}
    for line in lines:
        if not line.strip():
            continue
        inputs, separator, output = line.partition(" => ")
        if not separator:
            raise ValueError(f"malformed reaction: {line!r}")
        name, amount = _chemical(output)
        reactions[name] = (amount, dict(_chemical(part) for part in inputs.split(", ")))
    return reactions


def ore_required(reactions: Reactions, fuel: int = 1) -> int:
    """Return the ore needed to make ``fuel`` units of fuel, reusing leftovers."""
    if fuel < 0:
        raise ValueError("the amount of fuel must not be negative")
    wanted: deque[tuple[str, int]] = deque([(FUEL, fuel)])
    spare: defaultdict[str, int] = defaultdict(int)
    ore = 0
    while wanted:
        name, amount = wanted.popleft()
        if name == ORE:
            ore += amount
            continue
        used = min(amount, spare[name])
        spare[name] -= used
        amount -= used
        if not amount:
            continue
        try:
            made, inputs = reactions[name]
        except KeyError:
            raise ValueError(f"no reaction makes {name!r}") from None
        batches = -(-amount // made)
        spare[name] += batches * made - amount
        wanted.extend((chemical, need * batches) for chemical, need in inputs.items())
    return ore


def max_fuel(reactions: Reactions, ore: int = ORE_SUPPLY) -> int:
    """Return the most fuel that ``ore`` units of ore can make."""
    if ore_required(reactions, 1) > ore:
        return 0
    low, high = 1, 2
    while ore_required(reactions, high) <= ore:
        low, high = high, high * 2
    while high - low > 1:
        mid = (low + high) // 2
        if ore_required(reactions, mid) <= ore:
            low = mid
        else:
            high = mid
    return low


def solve(text: str) -> tuple[int, int]:
    """Return the ore for one fuel and the fuel a trillion ore makes."""
    reactions = parse_reactions(text.splitlines())
    return ore_required(reactions, 1), max_fuel(reactions)