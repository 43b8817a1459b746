"""Mull It Over: summing multiplications hidden in corrupted memory."""

import re

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_DO_OR_DONT = re.compile(r"do(n't)?\(\)")


def _sum_products(text):
    return sum(int(m.group(1)) * int(m.group(2)) for m in _MUL.finditer(text))


class Solution:
    """Corrupted program memory."""

    def __init__(self, text):
        self.text = text

    def part1(self):
        """Sum of every well-formed mul(a,b)."""
        return _sum_products(self.text)

    def part2(self):
        """Sum of mul(a,b) instructions that are enabled by do()/don't()."""
        ranges = []
        last_start = 0
        enabled = True
        for m in _DO_OR_DONT.finditer(self.text):
            is_do = m.group(1) is None
            if enabled and not is_do:
                ranges.append((last_start, m.start()))
            elif not enabled and is_do:
                last_start = m.start()
            enabled = is_do

        if enabled:
            ranges.append((last_start, len(self.text)))

        return sum(_sum_products(self.text[start:end]) for start, end in ranges)