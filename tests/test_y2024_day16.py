import pytest

from advent.y2024_day16 import UNREACHED, best_paths, parse

STRAIGHT = "#####\n#S.E#\n#####\n"
TURN = "####\n#.E#\n#S##\n####\n"


def test_parse_marks_start_and_end_as_floor():
    start, end, grid = parse(STRAIGHT)
    assert start == (1, 1)
    assert end == (3, 1)
    assert grid[start] == "."
    assert grid[end] == "."
    assert grid[(0, 0)] == "#"


def test_straight_corridor():
    score, tiles = best_paths(*parse(STRAIGHT))
    assert score == 2
    assert tiles == {(1, 1), (2, 1), (3, 1)}


def test_turn_costs_a_thousand():
    start, end, grid = parse(TURN)
    score, tiles = best_paths(start, end, grid)
    assert score == 2002
    assert tiles == {start, (1, 1), end}


def test_unreachable_end():
    score, tiles = best_paths(*parse("#####\n#S#E#\n#####\n"))
    assert score == UNREACHED
    assert tiles == set()


def test_tiles_only_on_floor():
    start, end, grid = parse(TURN)
    _, tiles = best_paths(start, end, grid)
    assert all(grid[tile] == "." for tile in tiles)


def test_open_maze_raises():
    with pytest.raises(ValueError):
        best_paths(*parse("S.E\n"))