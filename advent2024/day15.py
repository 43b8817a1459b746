"""Warehouse Woes: a robot pushing boxes around a warehouse."""

from collections import deque

_STEPS = {
    "<": lambda pos: (pos[0], pos[1] - 1),
    ">": lambda pos: (pos[0], pos[1] + 1),
    "^": lambda pos: (pos[0] - 1, pos[1]),
    "v": lambda pos: (pos[0] + 1, pos[1]),
}

_WIDE = {"#": "##", "O": "[]", ".": "..", "@": "@."}


def push(step, grid, robot):
    """Move the robot one step, pushing boxes; return its new position.

    The grid is a list of lists of characters and is changed in place. If a
    wall blocks the robot or any box it would push, nothing moves.
    """
    to_visit = deque([robot])
    visited = set()
    order = []
    while to_visit:
        pos = to_visit.popleft()
        if pos in visited:
            continue
        visited.add(pos)
        order.append(pos)

        i, j = step(pos)
        tile = grid[i][j]
        if tile == "O":
            to_visit.append((i, j))
        elif tile == "[":
            to_visit.append((i, j))
            to_visit.append((i, j + 1))
        elif tile == "]":
            to_visit.append((i, j))
            to_visit.append((i, j - 1))
        elif tile == "#":
            return robot
        elif tile != ".":
            raise ValueError(f"unexpected map tile {tile!r}")

    # Move the furthest things first so each vacated cell can be overwritten.
    for i, j in reversed(order):
        ni, nj = step((i, j))
        grid[ni][nj] = grid[i][j]
        grid[i][j] = "."

    return step(robot)


def _find_robot(grid):
    for i, row in enumerate(grid):
        for j, c in enumerate(row):
            if c == "@":
                return i, j
    raise ValueError("no robot found")


def _gps_sum(grid, box):
    return sum(
        100 * i + j for i, row in enumerate(grid) for j, c in enumerate(row) if c == box
    )


class Solution:
    """A warehouse map and the robot's list of moves."""

    def __init__(self, text):
        lines = iter(text.splitlines())
        self.map = []
        for line in lines:
            if not line:
                break
            self.map.append(line)
        self.moves = "".join(line.strip() for line in lines)

    def _run(self, grid):
        robot = _find_robot(grid)
        for move in self.moves:
            step = _STEPS.get(move)
            if step is None:
                raise ValueError(f"unexpected direction {move!r}")
            robot = push(step, grid, robot)
        return grid

    def part1(self):
        """Sum of box GPS coordinates after all moves."""
        grid = self._run([list(row) for row in self.map])
        return _gps_sum(grid, "O")

    def part2(self):
        """Sum of box GPS coordinates after all moves in the doubled-width warehouse."""
        wide = []
        for row in self.map:
            cells = []
            for c in row:
                if c not in _WIDE:
                    raise ValueError(f"unexpected map tile {c!r}")
                cells.extend(_WIDE[c])
            wide.append(cells)
        grid = self._run(wide)
        return _gps_sum(grid, "[")