import io

import pytest

from advent2024.day14 import HEIGHT, WIDTH, Solution, main


def _robots(specs):
    return "\n".join(f"p={px},{py} v={vx},{vy}" for px, py, vx, vy in specs)


def _line_with_late_robot():
    specs = [(x, 5, 0, 0) for x in range(9)]
    specs.append((9, 4, 0, 1))
    return _robots(specs)


def test_parse():
    solution = Solution("p=0,4 v=3,-3\np=6,3 v=-1,-3")
    assert [r.position for r in solution.robots] == [(0, 4), (6, 3)]
    assert [r.velocity for r in solution.robots] == [(3, -3), (-1, -3)]


@pytest.mark.parametrize("line", ["p=0,4", "q=0,4 v=1,1", "p=0,4 w=1,1", "p=04 v=1,1"])
def test_parse_rejects_malformed(line):
    with pytest.raises(ValueError):
        Solution(line)


def test_part1_one_robot_per_quadrant():
    text = _robots([(0, 0, 0, 0), (100, 0, 0, 0), (0, 102, 0, 0), (100, 102, 0, 0)])
    assert Solution(text).part1() == 1


def test_part1_ignores_middle_lines():
    text = _robots(
        [(0, 0, 0, 0), (0, 0, 0, 0), (100, 0, 0, 0), (0, 102, 0, 0), (100, 102, 0, 0),
         (50, 10, 0, 0), (10, 51, 0, 0)]
    )
    assert Solution(text).part1() == 2


def test_part1_empty_quadrant_gives_zero():
    assert Solution(_robots([(0, 0, 0, 0)])).part1() == 0


def test_step_wraps():
    solution = Solution(_robots([(0, 0, -1, -1), (100, 102, 1, 1)]))
    solution.step()
    assert [r.position for r in solution.robots] == [(100, 102), (0, 0)]


def test_tree_detection():
    ten = Solution(_robots([(x, 7, 0, 0) for x in range(20, 30)]))
    nine = Solution(_robots([(x, 7, 0, 0) for x in range(20, 29)]))
    assert ten.is_maybe_christmas_tree() is True
    assert nine.is_maybe_christmas_tree() is False


def test_part2_finds_first_tree():
    solution = Solution(_line_with_late_robot())
    assert solution.part2() == 1
    assert solution.robots[-1].position == (9, 4)


def test_part2_immediate_tree():
    assert Solution(_robots([(x, 0, 0, 0) for x in range(10)])).part2() == 0


def test_part2_without_tree_raises():
    with pytest.raises(ValueError):
        Solution(_robots([(x, 0, 0, 0) for x in range(9)])).part2()


def test_render(capsys):
    Solution(_robots([(3, 1, 0, 0)])).render()
    lines = capsys.readouterr().out.split("\n")[:-1]
    assert len(lines) == HEIGHT
    assert all(len(line) == WIDTH for line in lines)
    assert lines[1][3] == "X"
    assert lines[1].count("X") == 1
    assert sum(line.count("X") for line in lines) == 1


def test_main_shows_tree_and_stops_at_eof(tmp_path, monkeypatch, capsys):
    path = tmp_path / "input.txt"
    path.write_text(_line_with_late_robot())
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    main([str(path)])
    out = capsys.readouterr().out
    assert out.startswith("after 1 steps:\n")
    assert out.count("X") == 10