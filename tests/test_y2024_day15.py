import pytest

from advent.y2024_day15 import parse, part1, part2

SMALL = """########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

TOWER = "#####\n#...#\n#.O.#\n#.@.#\n#####\n"


def _run1(text, moves):
    start, grid, _ = parse(text, False)
    return part1(start, grid, list(moves))


def _run2(text, moves):
    start, grid, _ = parse(text, True)
    return part2(start, grid, list(moves))


def test_small_example():
    assert part1(*parse(SMALL, False)) == 2028


def test_parse_plain():
    start, grid, moves = parse(TOWER + "\n^v\n<>\n", False)
    assert start == (2, 3)
    assert grid[start] == "."
    assert grid[(2, 2)] == "O"
    assert moves == ["^", "v", "<", ">"]


def test_parse_double_width():
    start, grid, _ = parse(TOWER, True)
    assert start == (4, 3)
    assert grid[(4, 2)] == "["
    assert grid[(5, 2)] == "]"
    assert grid[(0, 0)] == grid[(1, 0)] == "#"
    assert grid[start] == grid[(5, 3)] == "."


def test_parse_double_width_unknown_tile():
    with pytest.raises(ValueError):
        parse("#X#\n", True)


def test_unexpected_move_raises():
    with pytest.raises(ValueError):
        _run1(TOWER, "x")
    with pytest.raises(ValueError):
        _run2(TOWER, "x")


def test_part1_push_up_and_blocked():
    initial = _run1(TOWER, "")
    assert _run1(TOWER, "^") == initial - 100
    assert _run1(TOWER, "^^") == _run1(TOWER, "^")


def test_part1_pushes_whole_row():
    open_row = "#@OO.#\n"
    assert _run1(open_row, ">") == _run1(open_row, "") + 2
    blocked = "#@OO#\n"
    assert _run1(blocked, ">") == _run1(blocked, "")


def test_part1_walls_stop_robot():
    text = "#####\n#@..#\n#####\n"
    assert _run1(text, "^<v") == _run1(text, "")


def test_part2_push_up_and_blocked():
    initial = _run2(TOWER, "")
    assert _run2(TOWER, "^") == initial - 100
    assert _run2(TOWER, "^^") == _run2(TOWER, "^")


def test_part2_horizontal_push():
    row = "#######\n#@O...#\n#######\n"
    initial = _run2(row, "")
    assert _run2(row, ">") == initial
    assert _run2(row, ">>") == initial + 1
    assert _run2(row, ">" * 20) == _run2(row, ">" * 7)


def test_part2_blocked_stack_does_not_move():
    stacked = "#####\n#.#.#\n#.O.#\n#.O.#\n#.@.#\n#####\n"
    initial = _run2(stacked, "")
    assert _run2(stacked, "^") == initial
    assert _run2(stacked, "^^^") == initial


def test_input_grid_is_not_modified():
    start, grid, moves = parse(SMALL, False)
    before = dict(grid)
    part1(start, grid, moves)
    assert grid == before