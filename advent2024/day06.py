"""Guard Gallivant: following a guard's patrol route."""

_UP = (-1, 0)


class CycleError(RuntimeError):
    """The guard's path loops forever."""

    def __init__(self):
        super().__init__("cycle detected")


def _turn_right(direction):
    di, dj = direction
    return dj, -di


class Solution:
    """A lab map with obstacles and a guard's starting point."""

    def __init__(self, text):
        self.obstacles = set()
        self.height = 0
        self.width = 0
        start = None

        for i, line in enumerate(text.splitlines()):
            self.height += 1
            self.width = len(line)
            for j, c in enumerate(line):
                if c == "^":
                    start = (i, j)
                elif c == "#":
                    self.obstacles.add((i, j))

        if start is None:
            raise ValueError("no starting position found")
        self.start = start

    def part1(self):
        """Number of distinct cells the guard visits."""
        return len(_locations(self.visit_path()))

    def part2(self):
        """Number of cells where one new obstacle traps the guard in a loop."""
        count = 0
        for cell in _locations(self.visit_path()):
            try:
                self._walk(self.obstacles | {cell})
            except CycleError:
                count += 1
            except RuntimeError:
                pass
        return count

    def visit_path(self):
        """Set of (location, direction) states along the guard's path."""
        return self._walk(self.obstacles)

    def _walk(self, obstacles):
        visited = set()
        direction = _UP
        location = self.start

        while 0 <= location[0] < self.height and 0 <= location[1] < self.width:
            state = (location, direction)
            if state in visited:
                raise CycleError()
            visited.add(state)

            nxt = (location[0] + direction[0], location[1] + direction[1])
            turns = 0
            while nxt in obstacles and turns < 4:
                direction = _turn_right(direction)
                nxt = (location[0] + direction[0], location[1] + direction[1])
                turns += 1
            if turns >= 4:
                raise RuntimeError(
                    "we turned four times, and kept hitting an obstacle; nowhere to go"
                )

            location = nxt

        return visited


def _locations(visited):
    return {location for location, _direction in visited}