"""Hiking trail scores and ratings on a topographic map."""

import sys
from pathlib import Path

_NEIGHBOURS = ((0, -1), (-1, 0), (1, 0), (0, 1))
_PEAK = 9


def parse(text):
    """Return ``((width, height), heights)`` with heights keyed by ``(x, y)``."""
    grid = {}
    width = height = 0
    for y, line in enumerate(text.split("\n")):
        if not line:
            continue
        for x, char in enumerate(line):
            if char not in "0123456789":
                raise ValueError(f"unexpected character {char!r}")
            grid[(x, y)] = int(char)
            width = max(width, x)
        height = max(height, y)
    return (width + 1, height + 1), grid


def _descend(width, height, grid, peaks, merge):
    """Carry a per-position value from the peaks down to height 0."""
    level_values = peaks
    for level in range(_PEAK, 0, -1):
        lower = {}
        for (x, y), value in level_values.items():
            for dx, dy in _NEIGHBOURS:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < width and 0 <= ny < height):
                    continue
                if grid[(nx, ny)] != level - 1:
                    continue
                if (nx, ny) in lower:
                    lower[(nx, ny)] = merge(lower[(nx, ny)], value)
                else:
                    lower[(nx, ny)] = value
        level_values = lower
    return level_values


def trailhead_scores(width, height, grid):
    """Sum over trailheads of the number of distinct peaks each can reach."""
    peaks = {pos: frozenset([pos]) for pos, value in grid.items() if value == _PEAK}
    heads = _descend(width, height, grid, peaks, frozenset.union)
    return sum(len(reached) for reached in heads.values())


def trailhead_ratings(width, height, grid):
    """Sum over trailheads of the number of distinct trails each starts."""
    peaks = {pos: 1 for pos, value in grid.items() if value == _PEAK}
    heads = _descend(width, height, grid, peaks, lambda a, b: a + b)
    return sum(heads.values())


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    (width, height), grid = parse(Path(path).read_text())
    print(f"Part 1: {trailhead_scores(width, height, grid)}")
    print(f"Part 2: {trailhead_ratings(width, height, grid)}")


if __name__ == "__main__":
    main()