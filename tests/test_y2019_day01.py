import pytest

from adventpuzzles.y2019.day01 import fuel, solve, total_fuel


def test_fuel_examples():
    assert fuel(12) == 2
    assert fuel(1969) == 654


def test_total_fuel_example():
    assert total_fuel(100756) == 50346


@pytest.mark.parametrize("mass", [14, 100, 1969, 5000, 100756])
def test_total_fuel_recurrence(mass):
    base = fuel(mass)
    assert total_fuel(mass) == base + total_fuel(base)


@pytest.mark.parametrize("mass", [9, 50, 1000, 123456])
def test_total_fuel_below_mass(mass):
    assert fuel(mass) <= total_fuel(mass) < mass


@pytest.mark.parametrize("mass", range(1, 9))
def test_tiny_masses_need_no_extra_fuel(mass):
    assert fuel(mass) <= 0
    assert total_fuel(mass) == 0


def test_solve_sums_each_part():
    masses = [12, 14, 1969, 100756]
    text = "\n".join(map(str, masses)) + "\n"
    assert solve(text) == (
        sum(fuel(m) for m in masses),
        sum(total_fuel(m) for m in masses),
    )


def test_solve_rejects_non_numbers():
    with pytest.raises(ValueError):
        solve("12\nabc\n")