"""Hoof It: scoring and rating hiking trails on a topographic map."""

from functools import lru_cache


class Solution:
    """A topographic map of heights 0 to 9."""

    def __init__(self, text):
        self.map = [[int(c) for c in line] for line in text.splitlines()]

    def neighbors(self, node, incoming=False):
        """Adjacent cells one step lower (incoming) or higher (outgoing)."""
        i, j = node
        height = self.map[i][j]
        if (incoming and height == 0) or (not incoming and height == 9):
            return []
        target = height - 1 if incoming else height + 1

        candidates = []
        if i > 0:
            candidates.append((i - 1, j))
        if j > 0:
            candidates.append((i, j - 1))
        if i < len(self.map) - 1:
            candidates.append((i + 1, j))
        if j < len(self.map[i]) - 1:
            candidates.append((i, j + 1))
        return [(a, b) for a, b in candidates if self.map[a][b] == target]

    def _cells_at(self, height):
        return [
            (i, j)
            for i, row in enumerate(self.map)
            for j, h in enumerate(row)
            if h == height
        ]

    def _reachable(self, start):
        seen = {start}
        stack = [start]
        while stack:
            for nxt in self.neighbors(stack.pop()):
                if nxt not in seen:
                    seen.add(nxt)
                    stack.append(nxt)
        return seen

    def part1(self):
        """Sum over trailheads of the number of peaks each can reach."""
        peaks = set(self._cells_at(9))
        return sum(
            len(self._reachable(trailhead) & peaks)
            for trailhead in sorted(self._cells_at(0))
        )

    def part2(self):
        """Sum over trailheads of the number of distinct trails to any peak."""

        @lru_cache(maxsize=None)
        def trails(node):
            i, j = node
            if self.map[i][j] == 9:
                return 1
            return sum(trails(nxt) for nxt in self.neighbors(node))

        return sum(trails(trailhead) for trailhead in self._cells_at(0))