import pytest

from advent.y2024_day20 import count_cheats, parse

U_TRACK = "#####\n#S#E#\n#.#.#\n#...#\n#####\n"


def test_parse_marks_start_and_end_as_floor():
    start, end, grid = parse(U_TRACK)
    assert start == (1, 1)
    assert end == (3, 1)
    assert grid[start] == "."
    assert grid[end] == "."
    assert grid[(2, 1)] == "#"


def test_single_cheat_through_the_middle_wall():
    start, end, grid = parse(U_TRACK)
    assert count_cheats(start, end, grid, 2, 4) == 1


def test_lower_threshold_finds_more_cheats():
    start, end, grid = parse(U_TRACK)
    assert count_cheats(start, end, grid, 2, 3) == 2


def test_counts_never_grow_with_the_required_saving():
    start, end, grid = parse(U_TRACK)
    counts = [count_cheats(start, end, grid, 2, saving) for saving in range(0, 8)]
    assert counts == sorted(counts, reverse=True)


def test_counts_never_shrink_with_longer_cheats():
    start, end, grid = parse(U_TRACK)
    counts = [count_cheats(start, end, grid, length, 1) for length in range(2, 8)]
    assert counts == sorted(counts)


def test_huge_saving_finds_nothing():
    start, end, grid = parse(U_TRACK)
    assert count_cheats(start, end, grid, 20, 1000) == 0


def test_unreachable_end_gives_no_cheats():
    start, end, grid = parse("#####\n#S#E#\n#####\n")
    assert count_cheats(start, end, grid, 20, 0) == 0


def test_open_track_edge_is_an_error():
    start, end, grid = parse("S.E\n")
    with pytest.raises(ValueError):
        count_cheats(start, end, grid, 2, 0)