import pytest

from adventpuzzles.y2018.day09 import high_score


@pytest.mark.parametrize(
    "players, marbles, expected",
    [
        (10, 1618, 8317),
        (13, 7999, 146373),
        (17, 1104, 2764),
        (21, 6111, 54718),
        (30, 5807, 37305),
    ],
)
def test_known_games(players, marbles, expected):
    assert high_score(players, marbles) == expected


def test_no_scoring_before_marble_23():
    assert high_score(5, 22) == 0


def test_first_scoring_marble_counted():
    assert high_score(9, 23) >= 23


def test_score_never_decreases_with_more_marbles():
    assert high_score(9, 100) <= high_score(9, 200)


def test_invalid_players():
    with pytest.raises(ValueError):
        high_score(0, 10)


def test_invalid_marbles():
    with pytest.raises(ValueError):
        high_score(3, -1)