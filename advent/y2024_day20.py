"""Race condition: counting cheats that shortcut the racetrack."""

import sys
from collections import deque
from pathlib import Path

WALL = "#"
FLOOR = "."

# Up, right, down, left.
_STEPS = ((0, -1), (1, 0), (0, 1), (-1, 0))


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


def _race_path(start, end, grid):
    """Breadth-first walk from ``start`` to ``end``.

    Returns a set of ``(position, score)`` pairs. Each position before the
    end carries its distance plus one; the end carries its own distance.
    The set is empty when the end cannot be reached.
    """
    queue = deque([(start, 0, None)])
    searched = {}
    while queue:
        pos, score, trail = queue.popleft()
        if pos == end:
            path = {(pos, score)}
            while trail is not None:
                entry, trail = trail
                path.add(entry)
            return path
        known = searched.get(pos)
        if known is not None and known < score:
            continue
        searched[pos] = score

        link = ((pos, score + 1), trail)
        for dx, dy in _STEPS:
            ahead = (pos[0] + dx, pos[1] + dy)
            try:
                cell = grid[ahead]
            except KeyError:
                raise ValueError(f"the track is open at {ahead}") from None
            if cell == WALL:
                continue
            queue.append((ahead, score + 1, link))
    return set()


def count_cheats(start, end, grid, max_cheat, min_saving):
    """Count pairs of track cells a cheat of 2 to ``max_cheat`` steps can join.

    A pair counts when the later cell lies more than ``min_saving`` steps
    further along the track and the shortcut saves at least ``min_saving``.
    """
    path = _race_path(start, end, grid)
    scores_at = {}
    for pos, score in path:
        scores_at.setdefault(pos, []).append(score)

    offsets = [
        (dx, dy, abs(dx) + abs(dy))
        for dx in range(-max_cheat, max_cheat + 1)
        for dy in range(-max_cheat, max_cheat + 1)
        if 2 <= abs(dx) + abs(dy) <= max_cheat
    ]

    count = 0
    for (x, y), first in path:
        for dx, dy, distance in offsets:
            for second in scores_at.get((x + dx, y + dy), ()):
                if first > second or second - first <= min_saving:
                    continue
                if second - distance - (first - 1) < min_saving:
                    continue
                count += 1
    return count


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    start, end, grid = parse(Path(path).read_text())
    print(f"Part 1: {count_cheats(start, end, grid, 2, 100)}")
    print(f"Part 2: {count_cheats(start, end, grid, 20, 100)}")


if __name__ == "__main__":
    main()