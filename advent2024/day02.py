"""Red-Nosed Reports: checking that level sequences change safely."""


def is_safe(levels):
    """True if levels strictly move one way, by steps of 1 to 3."""
    increasing = None
    last = levels[0]
    for level in levels[1:]:
        if level == last or abs(level - last) > 3:
            return False
        this_increasing = level > last
        if increasing is not None and increasing != this_increasing:
            return False
        last = level
        increasing = this_increasing
    return True


class Solution:
    """A list of reports, one per line."""

    def __init__(self, text):
        self.levels = [[int(s) for s in line.split()] for line in text.splitlines()]

    def part1(self):
        """Number of safe reports."""
        return sum(1 for levels in self.levels if is_safe(levels))

    def part2(self):
        """Number of reports that are safe after removing at most one level."""
        return sum(1 for levels in self.levels if self._dampened_safe(levels))

    @staticmethod
    def _dampened_safe(levels):
        if is_safe(levels):
            return True
        return any(is_safe(levels[:i] + levels[i + 1:]) for i in range(len(levels)))