import pytest

from advent2024.day13 import (
    Machine,
    Pair,
    Solution,
    integer_rref,
    parse_button,
    parse_prize,
)

EXAMPLE = """Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12167

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279
"""


def test_first_claw_machine_example():
    machine = Machine(Pair(94, 34), Pair(22, 67), Pair(8400, 5400))
    assert machine.solve() == Pair(80, 40)


def test_second_claw_machine_example():
    machine = Machine(Pair(26, 66), Pair(67, 21), Pair(12748, 12167))
    assert machine.solve() is None


def test_third_claw_machine_example():
    machine = Machine(Pair(17, 86), Pair(84, 37), Pair(7870, 6450))
    assert machine.solve() == Pair(38, 86)


def test_fourth_claw_machine_example():
    machine = Machine(Pair(69, 23), Pair(27, 71), Pair(18641, 10279))
    assert machine.solve() is None


def test_parse_example():
    solution = Solution(EXAMPLE)
    assert len(solution.machines) == 4
    assert solution.machines[0] == Machine(Pair(94, 34), Pair(22, 67), Pair(8400, 5400))
    assert solution.machines[3].prize == Pair(18641, 10279)


def test_example_part1():
    assert Solution(EXAMPLE).part1() == 480


def test_parse_button_and_prize():
    assert parse_button("Button B: X+22, Y+67") == Pair(22, 67)
    assert parse_prize("Prize: X=8400, Y=5400") == Pair(8400, 5400)


@pytest.mark.parametrize(
    "line",
    ["Button A X+1, Y+2", "Button A: X+1 Y+2", "Button A: X=1, Y+2", "Button A: X+1, Y=2"],
)
def test_parse_button_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_button(line)


def test_parse_prize_rejects_button_syntax():
    with pytest.raises(ValueError):
        parse_prize("Prize: X+1, Y+2")


def test_integer_rref_identity():
    assert integer_rref([[94, 22, 8400], [34, 67, 5400]]) == [[1, 0, 80], [0, 1, 40]]


def test_integer_rref_dependent_rows():
    assert integer_rref([[1, 2, 3], [2, 4, 6]]) is None