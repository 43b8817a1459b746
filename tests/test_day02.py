import pytest

from advent2024.day02 import Solution, is_safe

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_part1_example():
    assert Solution(EXAMPLE).part1() == 2


def test_part2_example():
    assert Solution(EXAMPLE).part2() == 4


@pytest.mark.parametrize(
    "levels, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
        ([5], True),
    ],
)
def test_is_safe(levels, expected):
    assert is_safe(levels) is expected


def test_is_safe_empty_raises():
    with pytest.raises(IndexError):
        is_safe([])