"""Claw Contraption: finding button presses that reach each prize."""

import math
from dataclasses import dataclass, replace
from typing import NamedTuple

_PRIZE_OFFSET = 10000000000000


class Pair(NamedTuple):
    """An (x, y) pair of integers."""

    x: int
    y: int


@dataclass(frozen=True)
class Machine:
    """A claw machine: two buttons and a prize location."""

    button_a: Pair
    button_b: Pair
    prize: Pair

    def solve(self):
        """Presses of (A, B) reaching the prize, or None if there is no unique integer answer."""
        matrix = [
            [self.button_a.x, self.button_b.x, self.prize.x],
            [self.button_a.y, self.button_b.y, self.prize.y],
        ]
        result = integer_rref(matrix)
        if result is None:
            return None
        (a0, a1, a2), (b0, b1, b2) = result
        if (a0, a1, b0, b1) == (1, 0, 0, 1):
            return Pair(a2, b2)
        return None


def integer_rref(matrix):
    """Reduce a 2x3 integer matrix using integer steps only; None if that fails."""
    top = list(matrix[0])
    bottom = list(matrix[1])

    divisor = math.gcd(top[0], bottom[0])
    x_factor = bottom[0] // divisor
    y_factor = top[0] // divisor
    bottom = [b * y_factor - t * x_factor for t, b in zip(top, bottom)]

    if bottom[1] == 0:
        # over- or under-constrained: either way no unique answer
        return None
    if bottom[1] < 0:
        bottom = [-b for b in bottom]

    if bottom[2] % bottom[1] != 0:
        return None
    divisor = bottom[1]
    bottom = [b // divisor for b in bottom]

    factor = top[1]
    top = [t - b * factor for t, b in zip(top, bottom)]

    if top[2] % top[0] != 0:
        return None
    divisor = top[0]
    top = [t // divisor for t in top]

    return [top, bottom]


def _parse_pair(line, x_prefix, y_prefix):
    _, sep, rest = line.partition(": ")
    if not sep:
        raise ValueError("no colon")
    x, sep, y = rest.partition(", ")
    if not sep:
        raise ValueError("no comma")
    if not x.startswith(x_prefix):
        raise ValueError(f"didn't start with {x_prefix}")
    if not y.startswith(y_prefix):
        raise ValueError(f"didn't start with {y_prefix}")
    return Pair(int(x[len(x_prefix):]), int(y[len(y_prefix):]))


def parse_button(line):
    """Parse a line such as 'Button A: X+94, Y+34'."""
    return _parse_pair(line, "X+", "Y+")


def parse_prize(line):
    """Parse a line such as 'Prize: X=8400, Y=5400'."""
    return _parse_pair(line, "X=", "Y=")


def _cost(presses):
    return 3 * presses.x + presses.y


class Solution:
    """A list of claw machines."""

    def __init__(self, text):
        self.machines = []
        lines = text.splitlines()
        for offset in range(0, len(lines), 4):
            block = lines[offset:offset + 3]
            if len(block) < 3:
                break
            top, middle, bottom = block
            self.machines.append(
                Machine(parse_button(top), parse_button(middle), parse_prize(bottom))
            )

    def part1(self):
        """Fewest tokens to win every winnable prize."""
        return sum(
            _cost(presses)
            for presses in map(Machine.solve, self.machines)
            if presses is not None
        )

    def part2(self):
        """Fewest tokens with every prize moved 10000000000000 further away."""
        total = 0
        for machine in self.machines:
            moved = replace(
                machine,
                prize=Pair(machine.prize.x + _PRIZE_OFFSET, machine.prize.y + _PRIZE_OFFSET),
            )
            presses = moved.solve()
            if presses is not None:
                total += _cost(presses)
        return total