"""Antenna antinodes on a city map."""

import sys
from pathlib import Path


def parse(text):
    """Return the map size ``(width, height)`` and antenna positions by frequency."""
    antennas = {}
    width = height = 0
    for y, line in enumerate(text.split("\n")):
        if not line:
            continue
        for x, char in enumerate(line):
            if char != ".":
                antennas.setdefault(char, []).append((x, y))
            width = max(width, x + 1)
        height = max(height, y + 1)
    return (width, height), antennas


def count_antinodes(size, antennas, min_multiplier, max_multiplier):
    """Count distinct in-map points ``a + k * (b - a)`` for same-frequency pairs.

    ``k`` runs over ``min_multiplier..=max_multiplier``.
    """
    width, height = size
    antinodes = set()
    for positions in antennas.values():
        for ax, ay in positions:
            for bx, by in positions:
                if (ax, ay) == (bx, by):
                    continue
                for k in range(min_multiplier, max_multiplier + 1):
                    x = ax + k * (bx - ax)
                    y = ay + k * (by - ay)
                    if 0 <= x < width and 0 <= y < height:
                        antinodes.add((x, y))
    return len(antinodes)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    size, antennas = parse(Path(path).read_text())
    print(f"Part1: {count_antinodes(size, antennas, 2, 2)}")
    print(f"Part2: {count_antinodes(size, antennas, 1, 100)}")


if __name__ == "__main__":
    main()