import pytest

from advent2024.day16 import Direction, Graph, Solution

STRAIGHT = """#####
#S.E#
#####"""

TURNING = """####
#.E#
#S##
####"""


def test_straight_corridor_part1():
    assert Solution(STRAIGHT).part1() == 2


def test_straight_corridor_part2():
    assert Solution(STRAIGHT).part2() == 3


def test_turning_part1():
    assert Solution(TURNING).part1() == 2002


def test_turning_part2():
    assert Solution(TURNING).part2() == 3


def test_missing_start_raises():
    with pytest.raises(ValueError):
        Solution("####\n#.E#\n####").part1()


def test_missing_end_raises():
    with pytest.raises(ValueError):
        Solution("####\n#S.#\n####").part1()


def test_graph_node_is_stable():
    graph = Graph(STRAIGHT.splitlines())
    first = graph.node((1, 1, Direction.EAST))
    assert graph.node((1, 1, Direction.EAST)) == first


def test_graph_dijkstra_forward_and_reverse():
    graph = Graph(STRAIGHT.splitlines())
    start = graph.node((1, 1, Direction.EAST))
    end = graph.node((1, 3, Direction.EAST))
    assert graph.dijkstra(start)[end] == 2
    assert graph.dijkstra(end, reverse=True)[start] == 2