"""Resonant Collinearity: counting antinodes of antenna pairs."""

from collections import defaultdict
from fractions import Fraction
from itertools import permutations, product


def distance_squared(a, b):
    """Squared Euclidean distance between two grid points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def colinear(a, b, c):
    """True if the three grid points lie on one line."""
    if a[1] == b[1] == c[1]:
        return True
    if a[1] == b[1] or b[1] == c[1]:
        return False
    ab = Fraction(b[0] - a[0], b[1] - a[1])
    bc = Fraction(c[0] - b[0], c[1] - b[1])
    return ab == bc


class Solution:
    """A map of antennas grouped by frequency."""

    def __init__(self, text):
        antennas = defaultdict(set)
        self.height = 0
        self.width = 0
        for i, line in enumerate(text.splitlines()):
            self.height += 1
            self.width = len(line)
            for j, c in enumerate(line):
                if c != ".":
                    antennas[c].add((i, j))
        self.antennas = dict(antennas)

    def _cells(self):
        return product(range(self.height), range(self.width))

    def _pairs(self):
        for locations in self.antennas.values():
            yield from permutations(locations, 2)

    def part1(self):
        """Cells in line with two same-frequency antennas, twice as far from one."""
        pairs = list(self._pairs())
        return sum(
            1
            for location in self._cells()
            if any(
                colinear(location, p, q)
                and distance_squared(location, p) == 4 * distance_squared(location, q)
                for p, q in pairs
            )
        )

    def part2(self):
        """Cells in line with any two same-frequency antennas."""
        pairs = list(self._pairs())
        return sum(
            1
            for location in self._cells()
            if any(colinear(location, p, q) for p, q in pairs)
        )