import pytest

from advent2024.day04 import Solution

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def test_example():
    solution = Solution(EXAMPLE)
    assert solution.part1() == 18
    assert solution.part2() == 9


def test_single_word_both_ways():
    assert Solution("XMASAMX").part1() == 2


def test_no_x_raises():
    with pytest.raises(ValueError):
        Solution("MAS\n").part1()


def test_missing_letter_raises():
    with pytest.raises(ValueError):
        Solution("XMA\n").part1()


def test_part2_missing_a_raises():
    with pytest.raises(ValueError):
        Solution("MS\nSM\n").part2()