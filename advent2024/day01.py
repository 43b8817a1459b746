"""Historian Hysteria: comparing two lists of location IDs."""

from collections import Counter


class Solution:
    """Two columns of location IDs, read side by side."""

    def __init__(self, text):
        self.left = []
        self.right = []
        for line in text.splitlines():
            fields = line.split()
            if len(fields) < 2:
                raise ValueError(f"expected two numbers on line {line!r}")
            self.left.append(int(fields[0]))
            self.right.append(int(fields[1]))

    def part1(self):
        """Total distance between the sorted lists."""
        return sum(abs(l - r) for l, r in zip(sorted(self.left), sorted(self.right)))

    def part2(self):
        """Similarity score: each left value times its count in the right list."""
        counts = Counter(self.right)
        return sum(value * counts[value] for value in self.left)