"""Plutonian Pebbles: counting stones that split as you blink."""

from functools import lru_cache


@lru_cache(maxsize=None)
def count_stones(remaining, stone):
    """Number of stones one stone becomes after the given number of blinks."""
    if remaining == 0:
        return 1
    if stone == 0:
        return count_stones(remaining - 1, 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return count_stones(remaining - 1, int(digits[:half])) + count_stones(
            remaining - 1, int(digits[half:])
        )
    return count_stones(remaining - 1, stone * 2024)


class Solution:
    """A row of engraved stones."""

    def __init__(self, text):
        self.stones = [int(s) for s in text.split()]

    def part1(self):
        """Stones after 25 blinks."""
        return sum(count_stones(25, stone) for stone in self.stones)

    def part2(self):
        """Stones after 75 blinks."""
        return sum(count_stones(75, stone) for stone in self.stones)