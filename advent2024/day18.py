"""RAM Run: escaping a memory grid as bytes fall into it."""

from collections import deque


class NoPathError(ValueError):
    """The exit cannot be reached from the start."""

    def __init__(self):
        super().__init__("No path found :'(")


def _neighbours(i, j, dimension):
    if i > 0:
        yield i - 1, j
    if j > 0:
        yield i, j - 1
    if i < dimension:
        yield i + 1, j
    if j < dimension:
        yield i, j + 1


def distance_to_end(corrupted, dimension):
    """Fewest steps from (0, 0) to (dimension, dimension) avoiding corrupted cells."""
    goal = (dimension, dimension)
    to_visit = deque([((0, 0), 0)])
    visited = set()

    while to_visit:
        position, distance = to_visit.popleft()
        if position in visited:
            continue
        visited.add(position)

        if position in corrupted:
            continue
        if position == goal:
            return distance

        for nxt in _neighbours(*position, dimension):
            to_visit.append((nxt, distance + 1))

    raise NoPathError()


def dfs_end(corrupted, dimension):
    """Some path from (0, 0) towards the exit, as the cells before the exit itself."""
    goal = (dimension, dimension)
    # Each stack entry carries its path as a chain of (cell, previous link) pairs.
    to_visit = [((0, 0), None)]
    visited = set()

    while to_visit:
        position, path = to_visit.pop()
        if position in visited:
            continue
        visited.add(position)

        if position in corrupted:
            continue
        if position == goal:
            cells = []
            while path is not None:
                cell, path = path
                cells.append(cell)
            cells.reverse()
            return cells

        extended = (position, path)
        for nxt in _neighbours(*position, dimension):
            to_visit.append((nxt, extended))

    raise NoPathError()


class Solution:
    """The list of byte positions that fall, in order, onto a square grid."""

    def __init__(self, text, count, dimension):
        self.count = count
        self.dimension = dimension
        self.bytes = []
        for line in text.splitlines():
            left, sep, right = line.partition(",")
            if not sep:
                raise ValueError(f"no comma in {line!r}")
            self.bytes.append((int(left), int(right)))

    def part1(self):
        """Fewest steps to the exit after the first `count` bytes have fallen."""
        corrupted = set(self.bytes[: self.count])
        if len(corrupted) != self.count:
            raise ValueError(
                f"expected {self.count} distinct bytes, found {len(corrupted)}"
            )
        return distance_to_end(corrupted, self.dimension)

    def part2(self):
        """Coordinates "x,y" of the first byte that cuts off the exit."""
        corrupted = set()
        last_path = None

        for position in self.bytes:
            corrupted.add(position)
            if last_path is None or position in last_path:
                try:
                    last_path = set(dfs_end(corrupted, self.dimension))
                except NoPathError:
                    i, j = position
                    return f"{i},{j}"

        raise ValueError("the end is always reachable")