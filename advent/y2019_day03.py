"""Crossing wires on an infinite grid."""

import sys
from enum import Enum
from pathlib import Path

NO_INTERSECTION = 2**31 - 1


class Direction(Enum):
    UP = (0, 1)
    DOWN = (0, -1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)


_LETTERS = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "R": Direction.RIGHT,
    "L": Direction.LEFT,
}


def _parse_move(token):
    if not token:
        raise ValueError("empty operation")
    length = int(token[1:])
    try:
        direction = _LETTERS[token[0]]
    except KeyError:
        raise ValueError(f"unexpected operation {token!r}") from None
    return direction, length


def parse_wires(text):
    """Parse one wire per line into lists of ``(Direction, length)``."""
    return [
        [_parse_move(token) for token in line.split(",")]
        for line in text.split("\n")
        if line
    ]


def closest_intersections(text):
    """Return the nearest crossing's Manhattan distance and the fewest combined steps.

    Only the first two wires are considered. When the wires never cross,
    both values are ``NO_INTERSECTION``.
    """
    wires = parse_wires(text)
    if len(wires) < 2:
        raise ValueError("two wires are required")

    visited = {}
    best_distance = NO_INTERSECTION
    best_steps = NO_INTERSECTION
    for wire_id, wire in enumerate(wires[:2]):
        x = y = steps = 0
        for direction, length in wire:
            dx, dy = direction.value
            for _ in range(length):
                x += dx
                y += dy
                steps += 1
                seen = visited.get((x, y))
                if seen is not None and seen[0] != wire_id:
                    best_distance = min(best_distance, abs(x) + abs(y))
                    best_steps = min(best_steps, seen[1] + steps)
                visited[(x, y)] = (wire_id, steps)
    return best_distance, best_steps


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("usage: y2019_day03 INPUT")
    distance, steps = closest_intersections(Path(args[0]).read_text())
    print(f"Part 1: {distance}")
    print(f"Part 2: {steps}")


if __name__ == "__main__":
    main()