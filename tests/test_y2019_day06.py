import pytest

from adventpuzzles.y2019.day06 import count_orbits, parse_orbits, solve, transfers

BASE = ["COM)B", "B)C", "C)D", "D)E", "E)F", "B)G", "G)H", "D)I", "E)J", "J)K", "K)L"]


def test_example_count():
    assert count_orbits(parse_orbits(BASE)) == 42


def test_example_transfers():
    text = "\n".join(BASE + ["K)YOU", "I)SAN"])
    parents = parse_orbits(text.splitlines())
    assert solve(text) == (count_orbits(parents), 4)


def test_parse_maps_satellite_to_center():
    assert parse_orbits(["A)B", "", "B)C"]) == {"B": "A", "C": "B"}


def test_leaf_under_root_adds_one():
    parents = parse_orbits(BASE)
    assert count_orbits(parse_orbits(BASE + ["COM)Z"])) == count_orbits(parents) + 1


def test_deeper_leaf_adds_one_more():
    under_k = count_orbits(parse_orbits(BASE + ["K)Z"]))
    under_l = count_orbits(parse_orbits(BASE + ["L)Z"]))
    assert under_l == under_k + 1


def test_transfers_symmetric():
    parents = parse_orbits(BASE + ["K)YOU", "I)SAN", "H)X"])
    assert transfers(parents, "YOU", "SAN") == transfers(parents, "SAN", "YOU")
    assert transfers(parents, "X", "YOU") == transfers(parents, "YOU", "X")


def test_transfers_to_self():
    parents = parse_orbits(BASE)
    assert transfers(parents, "L", "L") == 0


def test_unknown_object():
    with pytest.raises(ValueError):
        transfers(parse_orbits(BASE), "YOU", "L")


def test_malformed_line():
    with pytest.raises(ValueError):
        parse_orbits(["COM-B"])


def test_cycle_detected():
    with pytest.raises(ValueError):
        count_orbits(parse_orbits(["A)B", "B)A"]))