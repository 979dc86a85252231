"""Garden plot regions and the price of fencing them."""

import sys
from pathlib import Path

_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse(text):
    """Return ``((width, height), plants)`` with plants keyed by ``(x, y)``."""
    grid = {}
    width = height = 0
    for y, line in enumerate(text.split("\n")):
        if not line:
            continue
        for x, char in enumerate(line):
            grid[(x, y)] = char
            width = max(width, x)
        height = max(height, y)
    return (width + 1, height + 1), grid


def find_regions(width, height, grid):
    """Group orthogonally connected cells of the same plant into regions.

    Every in-bounds neighbour must be present in ``grid``.
    """
    seen = set()
    regions = []
    for pos, plant in grid.items():
        if pos in seen:
            continue
        region = {pos}
        stack = [pos]
        while stack:
            x, y = stack.pop()
            for dx, dy in _NEIGHBOURS:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < width and 0 <= ny < height):
                    continue
                neighbour = (nx, ny)
                if grid[neighbour] == plant and neighbour not in region:
                    region.add(neighbour)
                    stack.append(neighbour)
        seen |= region
        regions.append(frozenset(region))
    return regions


def _outside(region):
    """Yield ``(side, cell)`` for every neighbouring cell outside the region."""
    for x, y in region:
        for side, (dx, dy) in enumerate(_NEIGHBOURS):
            neighbour = (x + dx, y + dy)
            if neighbour not in region:
                yield side, neighbour


def fence_price(regions):
    """Sum of area times perimeter over all regions."""
    return sum(len(region) * sum(1 for _ in _outside(region)) for region in regions)


def _components(cells):
    remaining = set(cells)
    count = 0
    while remaining:
        stack = [remaining.pop()]
        count += 1
        while stack:
            x, y = stack.pop()
            for dx, dy in _NEIGHBOURS:
                neighbour = (x + dx, y + dy)
                if neighbour in remaining:
                    remaining.remove(neighbour)
                    stack.append(neighbour)
    return count


def _sides(region):
    by_side = {}
    for side, cell in _outside(region):
        by_side.setdefault(side, set()).add(cell)
    return sum(_components(cells) for cells in by_side.values())


def discounted_price(regions):
    """Sum of area times number of straight sides over all regions."""
    return sum(len(region) * _sides(region) for region in regions)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    (width, height), grid = parse(Path(path).read_text())
    regions = find_regions(width, height, grid)
    print(f"Part 1: {fence_price(regions)}")
    print(f"Part 2: {discounted_price(regions)}")


if __name__ == "__main__":
    main()