"""Reindeer Maze: cheapest paths through a maze where turning is costly."""

import heapq
from enum import Enum


class Direction(Enum):
    """A compass heading."""

    EAST = "east"
    WEST = "west"
    NORTH = "north"
    SOUTH = "south"


_STRAIGHT = 1
_ONE_TURN = 1001
_TWO_TURNS = 2001

# For each heading of movement: (opposite, the two perpendicular headings)
_TURNS = {
    Direction.WEST: (Direction.EAST, (Direction.NORTH, Direction.SOUTH)),
    Direction.NORTH: (Direction.SOUTH, (Direction.EAST, Direction.WEST)),
    Direction.EAST: (Direction.WEST, (Direction.NORTH, Direction.SOUTH)),
    Direction.SOUTH: (Direction.NORTH, (Direction.EAST, Direction.WEST)),
}


class Graph:
    """Weighted directed graph of (row, column, heading) states."""

    def __init__(self, grid):
        self.node_indexes = {}
        self._edges = []
        self._reverse = []

        for i, row in enumerate(grid):
            for j in range(len(grid[0])):
                if row[j] == "#":
                    continue
                moves = []
                if j > 0:
                    moves.append(((i, j - 1), Direction.WEST))
                if i > 0:
                    moves.append(((i - 1, j), Direction.NORTH))
                # Cells beyond the grid just have no way back out.
                moves.append(((i, j + 1), Direction.EAST))
                moves.append(((i + 1, j), Direction.SOUTH))

                for (ti, tj), heading in moves:
                    target = self.node((ti, tj, heading))
                    opposite, perpendicular = _TURNS[heading]
                    self._add_edge(self.node((i, j, heading)), target, _STRAIGHT)
                    for side in perpendicular:
                        self._add_edge(self.node((i, j, side)), target, _ONE_TURN)
                    self._add_edge(self.node((i, j, opposite)), target, _TWO_TURNS)

    def node(self, name):
        """Index of the node with this name, creating it if needed."""
        index = self.node_indexes.get(name)
        if index is None:
            index = len(self._edges)
            self.node_indexes[name] = index
            self._edges.append([])
            self._reverse.append([])
        return index

    def _add_edge(self, source, target, weight):
        self._edges[source].append((target, weight))
        self._reverse[target].append((source, weight))

    def dijkstra(self, start, reverse=False):
        """Shortest distances from start to every reachable node index."""
        adjacency = self._reverse if reverse else self._edges
        distances = {}
        heap = [(0, start)]
        while heap:
            distance, node = heapq.heappop(heap)
            if node in distances:
                continue
            distances[node] = distance
            for target, weight in adjacency[node]:
                if target not in distances:
                    heapq.heappush(heap, (distance + weight, target))
        return distances


class Solution:
    """A maze with a start tile S and an end tile E."""

    def __init__(self, text):
        self.map = text.splitlines()

    def _endpoints(self):
        start = end = None
        for i, row in enumerate(self.map):
            for j, c in enumerate(row):
                if c == "S":
                    start = (i, j)
                elif c == "E":
                    end = (i, j)
        if start is None:
            raise ValueError("no start found")
        if end is None:
            raise ValueError("no end found")
        return start, end

    def _setup(self):
        start, end = self._endpoints()
        graph = Graph(self.map)
        start_node = graph.node((start[0], start[1], Direction.EAST))
        distances = graph.dijkstra(start_node)
        end_nodes = [graph.node((end[0], end[1], d)) for d in Direction]
        reached = [distances[n] for n in end_nodes if n in distances]
        if not reached:
            raise ValueError("the end is unreachable")
        return graph, distances, end_nodes, min(reached)

    def part1(self):
        """Lowest score to get from start to end."""
        return self._setup()[3]

    def part2(self):
        """Number of tiles on at least one lowest-score path."""
        graph, distances, end_nodes, target = self._setup()
        to_end = [graph.dijkstra(n, reverse=True) for n in end_nodes]

        on_best = set()
        for node, distance in distances.items():
            if distance > target:
                continue
            remaining = [d[node] for d in to_end if node in d]
            if remaining and distance + min(remaining) == target:
                on_best.add(node)

        return len(
            {(i, j) for (i, j, _d), index in graph.node_indexes.items() if index in on_best}
        )