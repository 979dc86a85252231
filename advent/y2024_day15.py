"""Warehouse robot pushing boxes around."""

import sys
from pathlib import Path

WALL = "#"
FLOOR = "."
BOX = "O"
BOX_LEFT = "["
BOX_RIGHT = "]"
ROBOT = "@"

_MOVES = {"^": (0, -1), "v": (0, 1), "<": (-1, 0), ">": (1, 0)}
_WIDE = {FLOOR: FLOOR * 2, WALL: WALL * 2, BOX: BOX_LEFT + BOX_RIGHT}


def parse(text, double_width):
    """Return ``(start, grid, moves)``.

    The map ends at the first empty line; every later character is a move.
    The robot's cell is stored as floor. With ``double_width`` every tile is
    doubled horizontally and boxes become ``[]``.
    """
    grid = {}
    moves = []
    start = (0, 0)
    in_map = True
    for y, line in enumerate(text.split("\n")):
        if not line:
            in_map = False
            continue
        if not in_map:
            moves.extend(line)
            continue
        for x, char in enumerate(line):
            if not double_width:
                if char == ROBOT:
                    start = (x, y)
                    char = FLOOR
                grid[(x, y)] = char
                continue
            wide_x = x * 2
            if char == ROBOT:
                start = (wide_x, y)
                tiles = FLOOR * 2
            else:
                try:
                    tiles = _WIDE[char]
                except KeyError:
                    raise ValueError(f"unknown tile {char!r}") from None
            grid[(wide_x, y)] = tiles[0]
            grid[(wide_x + 1, y)] = tiles[1]
    return start, grid, moves


def _direction(move):
    try:
        return _MOVES[move]
    except KeyError:
        raise ValueError(f"unexpected move {move!r}") from None


def _gps_sum(grid, marker):
    return sum(y * 100 + x for (x, y), value in grid.items() if value == marker)


def _push_row(grid, box, dx, dy):
    """Push the line of boxes starting at ``box``; report whether it moved."""
    end = (box[0] + dx, box[1] + dy)
    while grid[end] == BOX:
        end = (end[0] + dx, end[1] + dy)
    if grid[end] != FLOOR:
        return False
    grid[end] = BOX
    grid[box] = FLOOR
    return True


def part1(start, grid, moves):
    """Sum of box GPS coordinates after the robot makes every move."""
    grid = dict(grid)
    position = start
    for move in moves:
        dx, dy = _direction(move)
        target = (position[0] + dx, position[1] + dy)
        cell = grid[target]
        if cell == WALL:
            continue
        if cell == BOX and not _push_row(grid, target, dx, dy):
            continue
        position = target
    return _gps_sum(grid, BOX)


def _shift(grid, pos, dx, dy, apply):
    """Check, and with ``apply`` perform, moving ``pos`` and all it pushes."""
    ahead = (pos[0] + dx, pos[1] + dy)
    cell = grid[ahead]
    if cell == FLOOR:
        movable = True
    elif cell in (BOX_LEFT, BOX_RIGHT):
        if dx == 0:
            left_x = ahead[0] if cell == BOX_LEFT else ahead[0] - 1
            left = _shift(grid, (left_x, ahead[1]), dx, dy, apply)
            right = _shift(grid, (left_x + 1, ahead[1]), dx, dy, apply)
            movable = left and right
        else:
            movable = _shift(grid, ahead, dx, dy, apply)
    else:
        movable = False
    if movable and apply:
        grid[ahead] = grid[pos]
        grid[pos] = FLOOR
    return movable


def part2(start, grid, moves):
    """Sum of wide-box GPS coordinates after the robot makes every move."""
    grid = dict(grid)
    position = start
    for move in moves:
        dx, dy = _direction(move)
        target = (position[0] + dx, position[1] + dy)
        cell = grid[target]
        if cell == WALL:
            continue
        if cell in (BOX_LEFT, BOX_RIGHT):
            if not _shift(grid, position, dx, dy, False):
                continue
            _shift(grid, position, dx, dy, True)
        position = target
    return _gps_sum(grid, BOX_LEFT)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    text = Path(path).read_text()
    print(f"Part 1: {part1(*parse(text, False))}")
    print(f"Part 2: {part2(*parse(text, True))}")


if __name__ == "__main__":
    main()