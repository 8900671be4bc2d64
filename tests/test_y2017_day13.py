import pytest

from adventpuzzles.y2017.day13 import (
    Firewall,
    SecurityLayer,
    ZeroLayer,
    parse_firewall,
    solve,
)

EXAMPLE = "0: 3\n1: 2\n4: 4\n6: 4\n"


def _benchmark_firewall():
    return Firewall(
        [
            SecurityLayer(0, 4, 0, True),
            SecurityLayer(1, 2, 0, True),
            SecurityLayer(2, 3, 0, True),
            ZeroLayer(),
            SecurityLayer(4, 5, 0, True),
            ZeroLayer(),
            SecurityLayer(6, 8, 0, True),
            ZeroLayer(),
            SecurityLayer(8, 6, 0, True),
            ZeroLayer(),
        ]
    )


def test_benchmark_firewall_not_caught_at_10000():
    assert _benchmark_firewall().caught(10000) is False


def test_benchmark_firewall_caught_without_delay():
    assert _benchmark_firewall().caught(0) is True


def test_parse_fills_gaps_with_empty_layers():
    firewall = parse_firewall(EXAMPLE)
    assert [type(layer) for layer in firewall.layers] == [
        SecurityLayer,
        SecurityLayer,
        ZeroLayer,
        ZeroLayer,
        SecurityLayer,
        ZeroLayer,
        SecurityLayer,
    ]
    assert firewall.layers[6] == SecurityLayer(6, 4)


def test_parse_malformed_raises():
    with pytest.raises(ValueError):
        parse_firewall("0 3")


def test_example_passthrough_severity():
    assert parse_firewall(EXAMPLE).passthrough() == 24


def test_solve_example():
    assert solve(EXAMPLE) == (24, 10)


@pytest.mark.parametrize("size", [2, 3, 5, 8])
def test_moving_matches_position_at(size):
    layer = SecurityLayer(0, size)
    for t in range(30):
        assert layer.scanner == layer.position_at(t)
        layer.move()


@pytest.mark.parametrize("delay", [0, 3, 7, 12, 101])
def test_jump_matches_stepping(delay):
    stepped = SecurityLayer(2, 5)
    for _ in range(delay):
        stepped.move()
    jumped = SecurityLayer(2, 5)
    jumped.jump(delay)
    assert (jumped.scanner, jumped.rising) == (stepped.scanner, stepped.rising)


def test_reset_restores_start():
    firewall = parse_firewall(EXAMPLE)
    firewall.passthrough()
    firewall.reset()
    assert firewall.layers == parse_firewall(EXAMPLE).layers


def test_zero_layer_never_catches():
    layer = ZeroLayer()
    layer.move()
    assert not layer.caught()
    assert layer.severity() == 0
    assert layer.position_at(0) == -1


def test_severity_is_depth_times_range():
    assert SecurityLayer(6, 4).severity() == 24