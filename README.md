# advent2024

Solutions to eighteen days of a December 2024 series of programming puzzles.
Each day has its own module, from `advent2024.day01` to `advent2024.day18`.
The package uses only the standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Usage

Each day's module has a `Solution` class. You build it from the puzzle input text
and call `part1()` and `part2()` on it:

```python
from pathlib import Path

from advent2024.day01 import Solution

solution = Solution(Path("input.txt").read_text())
print(solution.part1())
print(solution.part2())
```

Most answers are integers. These days differ:

- `advent2024.day17.Solution.part1()` returns the program's output as a
  comma-separated string. The module also provides `Computer`, whose `step()`
  runs one instruction and returns the value it outputs, or `None`.
- `advent2024.day18.Solution` also takes the number of fallen bytes to simulate
  and the grid dimension: `Solution(text, 1024, 70)`. Its `part2()` returns the
  blocking coordinate as a string such as `"26,50"`. If no path exists, the
  functions `distance_to_end` and `dfs_end` raise `NoPathError`.
- `advent2024.day13` also provides `Machine` and `Pair`. You can solve a single
  claw machine with `Machine.solve()`, which returns the button presses as a
  `Pair`, or `None` when no unique integer answer exists.
- `advent2024.day14.Solution` also has `step()`, `render()` and
  `is_maybe_christmas_tree()`, which advance, print and inspect the robots.

When the input makes an answer impossible, the call raises an exception. For
example, day 6 raises `CycleError` when the guard loops, and other days raise
`ValueError`. No call returns a sentinel value in place of an error.

## Day 14 viewer

Day 14 includes an interactive viewer. It moves the robots one second at a time
and draws the grid each time some row holds ten robots in an unbroken line:

    advent2024-day14 input.txt

Press Enter to search for the next candidate. The viewer stops at end of input.

## What is not included

- The package has no command that runs a day's solution on an input file. The
  day 14 viewer is the only command. For every other day, use the `Solution`
  classes from Python.
- No puzzle inputs are shipped. You supply the text yourself.