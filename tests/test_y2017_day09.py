import pytest

from adventpuzzles.y2017.day09 import solve, stream_scores


@pytest.mark.parametrize(
    "stream, score",
    [
        ("{}", 1),
        ("{{{}}}", 6),
        ("{{},{}}", 5),
        ("{{{},{},{{}}}}", 16),
        ("{<a>,<a>,<a>,<a>}", 1),
        ("{{<ab>},{<ab>},{<ab>},{<ab>}}", 9),
        ("{{<!!>},{<!!>},{<!!>},{<!!>}}", 9),
        ("{{<a!>},{<a!>},{<a!>},{<ab>}}", 3),
    ],
)
def test_group_scores(stream, score):
    assert stream_scores(stream).groups == score


@pytest.mark.parametrize(
    "stream, garbage",
    [
        ("<>", 0),
        ("<random characters>", 17),
        ("<<<<>", 3),
        ("<{!>}>", 2),
        ("<!!>", 0),
        ("<!!!>>", 0),
        ('<{o"i!a,<{i<a>', 10),
    ],
)
def test_garbage_counts(stream, garbage):
    assert stream_scores(stream).garbage == garbage


def test_solve_returns_both_parts():
    assert solve("{{<ab>},{<!!>}}\n") == (5, 2)