"""Restroom Redoubt: robots patrolling a wrapping grid."""

import argparse
import math
import sys
from collections import defaultdict
from dataclasses import dataclass

WIDTH = 101
HEIGHT = 103
_TREE_RUN = 10


@dataclass
class Robot:
    """A robot's position and per-second velocity."""

    position: tuple
    velocity: tuple


def _parse_pair(text):
    x, sep, y = text.partition(",")
    if not sep:
        raise ValueError("no comma")
    return int(x), int(y)


class Solution:
    """A set of robots on the bathroom grid."""

    def __init__(self, text):
        self.robots = []
        for line in text.splitlines():
            left, sep, right = line.partition(" ")
            if not sep:
                raise ValueError("no space")
            if not left.startswith("p="):
                raise ValueError("no p=")
            if not right.startswith("v="):
                raise ValueError("no v=")
            self.robots.append(Robot(_parse_pair(left[2:]), _parse_pair(right[2:])))

    def _copy(self):
        clone = Solution("")
        clone.robots = [Robot(r.position, r.velocity) for r in self.robots]
        return clone

    def part1(self):
        """Safety factor: product of robot counts per quadrant after 100 seconds."""
        quadrants = [0, 0, 0, 0]
        for robot in self.robots:
            x = (robot.position[0] + 100 * robot.velocity[0]) % WIDTH
            y = (robot.position[1] + 100 * robot.velocity[1]) % HEIGHT
            left = 0 <= x < 50
            right = 51 <= x < 101
            top = 0 <= y < 51
            bottom = 52 <= y < 103
            if left and top:
                quadrants[0] += 1
            elif left and bottom:
                quadrants[1] += 1
            elif right and top:
                quadrants[2] += 1
            elif right and bottom:
                quadrants[3] += 1
        return math.prod(quadrants)

    def part2(self):
        """Seconds until the robots first look like a Christmas tree."""
        dummy = self._copy()
        # positions repeat after WIDTH * HEIGHT steps
        for i in range(WIDTH * HEIGHT):
            if dummy.is_maybe_christmas_tree():
                return i
            dummy.step()
        raise ValueError("No tree was ever found.")

    def step(self):
        """Move every robot one second, wrapping at the edges."""
        for robot in self.robots:
            x, y = robot.position
            vx, vy = robot.velocity
            robot.position = ((x + vx) % WIDTH, (y + vy) % HEIGHT)

    def _rows(self):
        occupied = {robot.position for robot in self.robots}
        for y in range(HEIGHT):
            yield "".join("X" if (x, y) in occupied else " " for x in range(WIDTH))

    def render(self):
        """Print the grid, X for each occupied cell."""
        for line in self._rows():
            print(line)

    def is_maybe_christmas_tree(self):
        """True if some row holds ten robots in an unbroken horizontal line."""
        rows = defaultdict(set)
        for x, y in (robot.position for robot in self.robots):
            rows[y].add(x)
        for xs in rows.values():
            for x in xs:
                if x - 1 in xs:
                    continue
                run = 1
                while x + run in xs:
                    run += 1
                if run >= _TREE_RUN:
                    return True
        return False


def main(argv=None):
    """Step the robots, showing each tree-like frame and waiting for Enter."""
    parser = argparse.ArgumentParser(description="Look for a Christmas tree among robots.")
    parser.add_argument("input", help="file of robot positions and velocities")
    args = parser.parse_args(argv)

    with open(args.input, encoding="utf-8") as handle:
        solution = Solution(handle.read())

    i = 0
    while True:
        i += 1
        solution.step()
        if solution.is_maybe_christmas_tree():
            print(f"after {i} steps:")
            solution.render()
            if not sys.stdin.readline():
                return