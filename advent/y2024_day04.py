"""Word search for XMAS and crossed MAS."""

import sys
from pathlib import Path

WORD = "XMAS"
_DIRECTIONS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)]


def parse(text):
    """Non-empty lines of the puzzle."""
    return [line for line in text.split("\n") if line]


def _matches(grid, x, y, dx, dy):
    for step, letter in enumerate(WORD[1:], start=1):
        nx, ny = x + dx * step, y + dy * step
        if not (0 <= ny < len(grid) and 0 <= nx < len(grid[ny])):
            return False
        if grid[ny][nx] != letter:
            return False
    return True


def count_xmas(grid):
    """Occurrences of XMAS in any of the eight directions."""
    return sum(
        _matches(grid, x, y, dx, dy)
        for y, row in enumerate(grid)
        for x, letter in enumerate(row)
        if letter == WORD[0]
        for dx, dy in _DIRECTIONS
    )


def _is_mas(first, last):
    return {first, last} == {"M", "S"}


def count_cross_mas(grid):
    """Number of ``A`` cells whose two diagonals each spell MAS either way."""
    total = 0
    for y in range(1, len(grid) - 1):
        for x in range(1, len(grid[y]) - 1):
            if grid[y][x] != "A":
                continue
            if _is_mas(grid[y - 1][x - 1], grid[y + 1][x + 1]) and _is_mas(
                grid[y - 1][x + 1], grid[y + 1][x - 1]
            ):
                total += 1
    return total


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    grid = parse(Path(path).read_text())
    print(f"Part 1: {count_xmas(grid)}")
    print(f"Part 2: {count_cross_mas(grid)}")


if __name__ == "__main__":
    main()