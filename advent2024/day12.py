"""Garden Groups: pricing fences around garden regions."""

from enum import Enum
from itertools import product


class Side(Enum):
    """Which edge of a plot a fence segment lies on."""

    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"


class Solution:
    """A map of garden plots, one plant type per cell."""

    def __init__(self, text):
        self.map = text.splitlines()

    def _neighbours(self, i, j):
        yield Side.TOP, (i - 1, j)
        yield Side.LEFT, (i, j - 1)
        yield Side.BOTTOM, (i + 1, j)
        yield Side.RIGHT, (i, j + 1)

    def _same_plant(self, i, j, ni, nj):
        return (
            0 <= ni < len(self.map)
            and 0 <= nj < len(self.map[ni])
            and self.map[ni][nj] == self.map[i][j]
        )

    def _regions(self):
        """Yield (area, fence segments) for each connected region."""
        if not self.map:
            return
        unvisited = set(product(range(len(self.map)), range(len(self.map[0]))))
        while unvisited:
            start = unvisited.pop()
            frontier = [start]
            area = 0
            perimeter = set()
            while frontier:
                i, j = frontier.pop()
                area += 1
                for side, (ni, nj) in self._neighbours(i, j):
                    if self._same_plant(i, j, ni, nj):
                        if (ni, nj) in unvisited:
                            unvisited.remove((ni, nj))
                            frontier.append((ni, nj))
                    else:
                        perimeter.add((i, j, side))
            yield area, perimeter

    def part1(self):
        """Sum of area times perimeter over all regions."""
        return sum(area * len(perimeter) for area, perimeter in self._regions())

    def part2(self):
        """Sum of area times number of straight sides over all regions."""
        return sum(area * _count_sides(perimeter) for area, perimeter in self._regions())


def _count_sides(perimeter):
    remaining = set(perimeter)
    sides = 0
    while remaining:
        i, j, side = remaining.pop()
        sides += 1
        di, dj = (1, 0) if side in (Side.LEFT, Side.RIGHT) else (0, 1)
        for sign in (-1, 1):
            k = 1
            while (segment := (i + sign * k * di, j + sign * k * dj, side)) in remaining:
                remaining.remove(segment)
                k += 1
    return sides