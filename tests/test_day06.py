import pytest

from advent2024.day06 import CycleError, Solution

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#..."""

LOOPING = """.#..
.^.#
#...
..#."""


def test_example():
    solution = Solution(EXAMPLE)
    assert solution.part1() == 41
    assert solution.part2() == 6


def test_straight_exit():
    solution = Solution("...\n.^.\n...")
    assert solution.part1() == 2
    assert solution.part2() == 0


def test_visit_path_records_directions():
    path = Solution(".\n^").visit_path()
    assert path == {((1, 0), (-1, 0)), ((0, 0), (-1, 0))}


def test_cycle_detected():
    with pytest.raises(CycleError, match="cycle detected"):
        Solution(LOOPING).part1()


def test_boxed_in_raises():
    with pytest.raises(RuntimeError, match="nowhere to go"):
        Solution(".#.\n#^#\n.#.").part1()


def test_missing_start_raises():
    with pytest.raises(ValueError):
        Solution("...\n.#.\n")