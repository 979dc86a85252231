import pytest

from advent.y2019_day06 import OrbitMap, main

EXAMPLE = "COM)B\nB)C\nC)D\nD)E\nE)F\nB)G\nG)H\nD)I\nE)J\nJ)K\nK)L\n"
WITH_TRAVELLERS = EXAMPLE + "K)YOU\nI)SAN\n"


def test_example_orbit_count():
    assert OrbitMap.from_text(EXAMPLE).count_orbits() == 42


def test_example_transfers():
    assert OrbitMap.from_text(WITH_TRAVELLERS).transfers("YOU", "SAN") == 4


def test_transfers_are_symmetric():
    orbit = OrbitMap.from_text(WITH_TRAVELLERS)
    assert orbit.transfers("YOU", "SAN") == orbit.transfers("SAN", "YOU")


def test_line_order_does_not_matter():
    lines = EXAMPLE.strip().split("\n")
    reordered = "\n".join(reversed(lines))
    assert (
        OrbitMap.from_text(reordered).count_orbits()
        == OrbitMap.from_text(EXAMPLE).count_orbits()
    )


def test_star_counts_one_per_satellite():
    names = ["A", "B", "C", "D", "E"]
    text = "\n".join(f"COM){name}" for name in names)
    assert OrbitMap.from_text(text).count_orbits() == len(names)


def test_siblings_need_no_transfers():
    orbit = OrbitMap.from_text("COM)A\nA)YOU\nA)SAN\n")
    assert orbit.transfers("YOU", "SAN") == 0


def test_parsed_structure():
    orbit = OrbitMap.from_text("COM)A\nCOM)B\n")
    assert orbit.children["COM"] == ["A", "B"]
    assert orbit.parents == {"A": "COM", "B": "COM"}


def test_centre_has_no_parent():
    orbit = OrbitMap.from_text(WITH_TRAVELLERS)
    with pytest.raises(ValueError):
        orbit.transfers("COM", "SAN")


def test_missing_centre_raises():
    with pytest.raises(KeyError):
        OrbitMap.from_text("A)B\n").count_orbits()


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        OrbitMap.from_text("COM-A\n")


def test_main_prints(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(WITH_TRAVELLERS)
    main([str(path)])
    orbit = OrbitMap.from_text(WITH_TRAVELLERS)
    assert capsys.readouterr().out.splitlines() == [
        f"Part 1: {orbit.count_orbits()}",
        f"Part 2: {orbit.transfers('YOU', 'SAN')}",
    ]