import pytest

from adventpuzzles.y2024.day11 import blink, count_stones, solve


def test_one_blink_example():
    assert blink([0, 1, 10, 99, 999]) == [1, 2024, 1, 0, 9, 9, 2021976]


def test_leading_zeros_are_dropped_when_splitting():
    assert blink([1000]) == [10, 0]


def test_zero_blinks_keeps_one_stone():
    assert count_stones(125, 0) == 1


@pytest.mark.parametrize("stone", [0, 1, 17, 125, 2024, 999])
@pytest.mark.parametrize("blinks", [1, 3, 6])
def test_count_matches_blinking(stone, blinks):
    row = [stone]
    for _ in range(blinks):
        row = blink(row)
    assert count_stones(stone, blinks) == len(row)


def test_negative_blinks_fail():
    with pytest.raises(ValueError):
        count_stones(1, -1)


def test_example_after_25_blinks():
    assert sum(count_stones(stone, 25) for stone in (125, 17)) == 55312


def test_solve_first_part_matches_count():
    first, second = solve("125 17")
    assert first == sum(count_stones(stone, 25) for stone in (125, 17))
    assert second == sum(count_stones(stone, 75) for stone in (125, 17))
    assert second > first