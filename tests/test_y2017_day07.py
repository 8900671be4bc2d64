import pytest

from adventpuzzles.y2017.day07 import build_tower, parse_disc, solve

EXAMPLE = """\
pbga (66)
xhth (57)
ebii (61)
havc (66)
ktlj (57)
fwft (72) -> ktlj, cntj, xhth
qoyq (66)
padx (45) -> pbga, havc, qoyq
tknk (41) -> ugml, padx, fwft
jptl (61)
ugml (68) -> gyxo, ebii, jptl
gyxo (61)
cntj (57)
"""


def _all_discs(disc):
    yield disc
    for child in disc.children:
        yield from _all_discs(child)


def test_parse_disc_with_children():
    disc = parse_disc("fwft (72) -> ktlj, cntj, xhth")
    assert (disc.name, disc.weight, disc.child_names) == ("fwft", 72, ["ktlj", "cntj", "xhth"])


def test_parse_leaf_disc():
    disc = parse_disc("pbga (66)")
    assert (disc.name, disc.weight, disc.child_names) == ("pbga", 66, [])


def test_parse_malformed_raises():
    with pytest.raises(ValueError):
        parse_disc("pbga 66")


def test_build_tower_finds_bottom():
    assert build_tower(EXAMPLE.splitlines()).name == "tknk"


def test_build_tower_links_every_disc():
    root = build_tower(EXAMPLE.splitlines())
    assert len(list(_all_discs(root))) == len(EXAMPLE.splitlines())


def test_unknown_child_raises():
    with pytest.raises(ValueError):
        build_tower(["a (1) -> b"])


def test_balanced_tower_weighs_everything():
    root = build_tower(["a (4) -> b, c, d", "b (2)", "c (2)", "d (2)"])
    total, correction = root.balance()
    assert not correction
    assert total == sum(disc.weight for disc in _all_discs(root))


def test_solve_example():
    assert solve(EXAMPLE) == ("tknk", 60)