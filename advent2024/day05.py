"""Print Queue: checking and fixing page ordering rules."""

from collections import defaultdict


class Solution:
    """Ordering rules and the updates they apply to."""

    def __init__(self, text):
        lines = iter(text.splitlines())

        rules = defaultdict(set)
        for line in lines:
            if not line:
                break
            before, sep, after = line.partition("|")
            if not sep:
                raise ValueError("no pipe found")
            rules[int(before)].add(int(after))
        self.rules = dict(rules)

        self.updates = [[int(s) for s in line.split(",")] for line in lines]

    def _first_violation(self, pages):
        """Return (i, j) where pages[j] must come after pages[i] but precedes it."""
        for i, page in enumerate(pages):
            must_be_after = self.rules.get(page)
            if not must_be_after:
                continue
            for j, earlier in enumerate(pages[:i]):
                if earlier in must_be_after:
                    return i, j
        return None

    def part1(self):
        """Sum of middle pages of correctly ordered updates."""
        return sum(
            pages[len(pages) // 2]
            for pages in self.updates
            if self._first_violation(pages) is None
        )

    def part2(self):
        """Sum of middle pages of out-of-order updates after reordering them."""
        total = 0
        for pages in self.updates:
            if self._first_violation(pages) is None:
                continue
            update = list(pages)
            while (violation := self._first_violation(update)) is not None:
                i, j = violation
                update[i], update[j] = update[j], update[i]
            total += update[len(update) // 2]
        return total