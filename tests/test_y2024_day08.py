from advent.y2024_day08 import count_antinodes, parse

EXAMPLE = "\n".join(
    [
        "............",
        "........0...",
        ".....0......",
        ".......0....",
        "....0.......",
        "......A.....",
        "............",
        "............",
        "........A...",
        ".........A..",
        "............",
        "............",
    ]
) + "\n"


def test_parse_groups_by_frequency():
    size, antennas = parse(EXAMPLE)
    assert size == (12, 12)
    assert sorted(antennas) == ["0", "A"]
    assert antennas["0"] == [(8, 1), (5, 2), (7, 3), (4, 4)]
    assert len(antennas["A"]) == 3


def test_example_part1():
    size, antennas = parse(EXAMPLE)
    assert count_antinodes(size, antennas, 2, 2) == 14


def test_example_part2():
    size, antennas = parse(EXAMPLE)
    assert count_antinodes(size, antennas, 1, 100) == 34


def test_single_antenna_has_no_antinodes():
    size, antennas = parse("....\n.a..\n....\n")
    assert count_antinodes(size, antennas, 1, 100) == 0


def test_multiplier_one_marks_the_antennas_themselves():
    size, antennas = parse(EXAMPLE)
    positions = {pos for group in antennas.values() for pos in group}
    assert count_antinodes(size, antennas, 1, 1) == len(positions)


def test_wider_multiplier_range_never_finds_fewer():
    size, antennas = parse(EXAMPLE)
    narrow = count_antinodes(size, antennas, 2, 2)
    wide = count_antinodes(size, antennas, 1, 100)
    assert wide >= narrow


def test_antinodes_outside_map_are_dropped():
    size, antennas = parse("a.a\n")
    # The mirrored points lie at x = -2 and x = 4, both off the map.
    assert count_antinodes(size, antennas, 2, 2) == 0