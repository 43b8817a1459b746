"""Bridge Repair: finding operators that make calibration equations true."""

import operator

_MAX_VALUES = 12


def _concatenate(a, b):
    return int(f"{a}{b}")


def all_options(first, rest, operators):
    """Yield every left-to-right result of combining values with the operators."""
    if not rest:
        yield first
        return
    for op in operators:
        yield from all_options(op(first, rest[0]), rest[1:], operators)


class Solution:
    """Calibration equations: a target and the values that may produce it."""

    def __init__(self, text):
        self.equations = []
        for line in text.splitlines():
            target, sep, values = line.partition(": ")
            if not sep:
                raise ValueError('": " not found')
            self.equations.append((int(target), [int(v) for v in values.split()]))

    def _total(self, operators):
        total = 0
        for target, values in self.equations:
            if len(values) > _MAX_VALUES:
                raise ValueError(f"too many values: {target}: {values}")
            if target in all_options(values[0], values[1:], operators):
                total += target
        return total

    def part1(self):
        """Sum of targets reachable with + and *."""
        return self._total((operator.add, operator.mul))

    def part2(self):
        """Sum of targets reachable with +, * and concatenation."""
        return self._total((operator.add, operator.mul, _concatenate))