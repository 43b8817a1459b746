import pytest

from advent2024.day09 import Solution

EXAMPLE = "2333133121414131402"


def test_example_part1():
    assert Solution(EXAMPLE).part1() == 1928


def test_example_part2():
    assert Solution(EXAMPLE).part2() == 2858


def test_parse_small_map():
    solution = Solution("12345\n")
    assert solution.disk == [0, None, None, 1, 1, 1, None, None, None, None, 2, 2, 2, 2, 2]


def test_small_map_part1():
    assert Solution("12345").part1() == 60


def test_part1_without_free_space_raises():
    with pytest.raises(ValueError, match="no free blocks"):
        Solution("9").part1()


def test_part2_does_not_change_stored_disk():
    solution = Solution(EXAMPLE)
    before = list(solution.disk)
    solution.part2()
    assert solution.disk == before