"""Reindeer maze: the cheapest route and the tiles on the best routes."""

import sys
from collections import deque
from pathlib import Path

WALL = "#"
FLOOR = "."
UNREACHED = 1_000_000_000
START_DIRECTION = 1
STEP_COST = 1
TURN_COST = 1000

# Direction index to (dx, dy): north, east, south, west.
_STEPS = {0: (0, -1), 1: (1, 0), 2: (0, 1), 3: (-1, 0)}


def parse(text):
    """Return ``(start, end, grid)``; the ``S`` and ``E`` cells are stored as floor."""
    grid = {}
    start = end = (0, 0)
    for y, line in enumerate(text.split("\n")):
        if not line:
            continue
        for x, char in enumerate(line):
            if char == "S":
                start = (x, y)
                char = FLOOR
            elif char == "E":
                end = (x, y)
                char = FLOOR
            grid[(x, y)] = char
    return start, end, grid


def best_paths(start, end, grid):
    """Search from ``start`` facing east to ``end``.

    Moving forward costs 1; turning a quarter and stepping costs 1001.
    Returns ``(score, tiles)``: the lowest score found and the tiles on the
    routes recorded for it. When ``end`` is unreachable the score is
    ``UNREACHED`` and the tiles are empty.
    """
    queue = deque([(start, START_DIRECTION, 0, frozenset())])
    searched = {}
    lowest = UNREACHED
    tiles = set()
    while queue:
        pos, direction, score, previous = queue.popleft()
        if pos == end:
            if score != lowest:
                tiles = set()
            tiles |= previous
            tiles.add(pos)
            lowest = min(lowest, score)
            continue
        known = searched.get((pos, direction))
        if known is not None and known < score:
            continue
        searched[(pos, direction)] = score

        trail = previous | {pos}
        for turn in (-1, 0, 1):
            new_direction = (direction + turn) % 4
            dx, dy = _STEPS[new_direction]
            ahead = (pos[0] + dx, pos[1] + dy)
            try:
                cell = grid[ahead]
            except KeyError:
                raise ValueError(f"the maze is open at {ahead}") from None
            if cell == WALL:
                continue
            cost = STEP_COST if turn == 0 else STEP_COST + TURN_COST
            queue.append((ahead, new_direction, score + cost, trail))
    return lowest, tiles


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    start, end, grid = parse(Path(path).read_text())
    score, tiles = best_paths(start, end, grid)
    print(f"Part 1: {score}")
    print(f"Part 2: {len(tiles)}")


if __name__ == "__main__":
    main()