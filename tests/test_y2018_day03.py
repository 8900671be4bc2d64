import pytest

from adventpuzzles.y2018.day03 import Claim, Fabric, parse_claim, solve

EXAMPLE = "#1 @ 1,3: 4x4\n#2 @ 3,1: 4x4\n#3 @ 5,5: 2x2\n"


def test_parse_claim():
    assert parse_claim("#123 @ 3,2: 5x4") == Claim(123, 3, 2, 5, 4)


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_claim("claim 1 at 3,2")


def test_example():
    assert solve(EXAMPLE) == (4, 3)


def test_single_claim_never_overlaps():
    fabric = Fabric()
    claim = Claim(7, 0, 0, 3, 3)
    fabric.claim(claim)
    assert fabric.overlapping() == 0
    assert fabric.freestanding([claim]) == 7


def test_identical_claims_overlap_fully():
    fabric = Fabric()
    first, second = Claim(1, 2, 2, 3, 2), Claim(2, 2, 2, 3, 2)
    fabric.claim(first)
    fabric.claim(second)
    assert fabric.overlapping() == first.w * first.h
    assert fabric.freestanding([first, second]) is None