"""Falling bytes: escaping the memory grid."""

import heapq
import itertools
import sys
from pathlib import Path

NO_BLOCKER = (-1, -1)
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse(text):
    """Read ``x,y`` byte positions, one per line."""
    positions = []
    for line in text.split("\n"):
        if not line:
            continue
        x, y = (int(piece) for piece in line.split(","))
        positions.append((x, y))
    return positions


def shortest_path(width, height, falling, count, first_path):
    """Cells of a path from ``(0, 0)`` to ``(width, height)``, both ends included.

    The first ``count`` bytes block their cells. Cells nearer the exit
    are explored first; with ``first_path`` the search stops at the first
    route found. Returns an empty set when no route is found.
    """
    if count > len(falling):
        raise ValueError(f"only {len(falling)} bytes are listed")
    blocked = set(falling[:max(count, 0)])
    target = (width, height)

    def cost(pos):
        return (pos[0] - width) ** 2 + (pos[1] - height) ** 2

    tie = itertools.count()
    start = (0, 0)
    heap = [(cost(start), 0, 0, next(tie), start, frozenset([start]))]
    checked = {}
    final = frozenset()
    shortest = width * height
    while heap:
        *_, pos, previous = heapq.heappop(heap)
        known = checked.get(pos)
        if known is not None and known <= len(previous):
            continue
        checked[pos] = len(previous)

        trail = previous | {pos}
        if pos == target:
            if len(trail) < shortest:
                final = trail
                shortest = len(trail)
                if first_path:
                    break
            else:
                break

        for dx, dy in _NEIGHBOURS:
            nx, ny = pos[0] + dx, pos[1] + dy
            if 0 <= nx <= width and 0 <= ny <= height and (nx, ny) not in blocked:
                heapq.heappush(heap, (cost((nx, ny)), -nx, -ny, next(tie), (nx, ny), trail))
    return set(final)


def part1(width, height, falling, count):
    """Steps on the shortest route after ``count`` bytes have fallen."""
    path = shortest_path(width, height, falling, count, False)
    if not path:
        raise ValueError("the exit cannot be reached")
    return len(path) - 1


def part2(width, height, falling, count):
    """First byte after the first ``count`` that cuts off the exit."""
    for index in range(count, len(falling)):
        if not shortest_path(width, height, falling, index + 1, True):
            return falling[index]
    return NO_BLOCKER


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    if len(args) == 4:
        width, height, fallen = (int(arg) for arg in args[1:])
    elif len(args) <= 1:
        width, height, fallen = 70, 70, 1024
    else:
        raise SystemExit("usage: y2024_day18 [INPUT [WIDTH HEIGHT BYTES]]")
    falling = parse(Path(path).read_text())
    print(f"Part 1: {part1(width, height, falling, fallen)}")
    x, y = part2(width, height, falling, fallen)
    print(f"Part 2: {x},{y}")


if __name__ == "__main__":
    main()