"""Ceres Search: finding XMAS in a word search."""

from collections import defaultdict

_DIRECTIONS = [(1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1)]
_DIAGONALS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]


class Solution:
    """A grid of letters, indexed by letter."""

    def __init__(self, text):
        self.loc = defaultdict(set)
        for i, line in enumerate(text.splitlines()):
            for j, c in enumerate(line):
                self.loc[c].add((i, j))
        self.loc = dict(self.loc)

    def part1(self):
        """Occurrences of XMAS in any of the eight directions."""
        if "X" not in self.loc:
            raise ValueError("no Xes found")

        count = 0
        for x_i, x_j in self.loc["X"]:
            for di, dj in _DIRECTIONS:
                if self._spells_mas(x_i, x_j, di, dj):
                    count += 1
        return count

    def _spells_mas(self, i, j, di, dj):
        for letter in "MAS":
            i += di
            j += dj
            positions = self.loc.get(letter)
            if positions is None:
                raise ValueError(f"no {letter}s anywhere at all")
            if (i, j) not in positions:
                return False
        return True

    def part2(self):
        """Occurrences of two MAS crossing diagonally at an A."""
        a_s = self._require("A")
        m_s = self._require("M")
        s_s = self._require("S")

        count = 0
        for a_i, a_j in a_s:
            crossings = sum(
                1
                for di, dj in _DIAGONALS
                if (a_i + di, a_j + dj) in m_s and (a_i - di, a_j - dj) in s_s
            )
            if crossings == 2:
                count += 1
        return count

    def _require(self, letter):
        positions = self.loc.get(letter)
        if positions is None:
            raise ValueError(f"no {letter}'s found")
        return positions