import pytest

from adventpuzzles.y2017.day24 import Component, parse_components, solve, strongest

EXAMPLE = "0/2\n2/2\n2/3\n3/4\n3/5\n0/1\n10/1\n9/10\n"


def test_parse_components():
    components = parse_components(EXAMPLE)
    assert components[0] == Component(0, 2)
    assert components[-1] == Component(9, 10)
    assert len(components) == 8


def test_parse_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_components("0-2\n")


def test_strongest_example():
    assert strongest(parse_components(EXAMPLE), 0, False)[0] == 31


def test_no_components():
    assert strongest([], 0, False) == (0, 0)
    assert strongest([], 0, True) == (0, 0)


def test_single_component():
    assert strongest([Component(0, 5)]) == (5, 1)
    assert strongest([Component(5, 0)], 0, True) == (5, 1)


def test_unreachable_component_ignored():
    assert strongest([Component(4, 7)]) == (0, 0)


def test_longest_never_stronger_than_strongest():
    components = parse_components(EXAMPLE)
    assert strongest(components, 0, True)[0] <= strongest(components, 0, False)[0]


def test_solve_matches_parts():
    components = parse_components(EXAMPLE)
    a, b, length = solve(EXAMPLE)
    assert a == strongest(components, 0, False)[0]
    assert (b, length) == strongest(components, 0, True)