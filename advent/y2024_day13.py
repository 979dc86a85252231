"""Claw machines: the cheapest button presses that reach each prize."""

import math
import re
import sys
from pathlib import Path

OFFSET = 10_000_000_000_000
A_COST = 3
B_COST = 1
_EPSILON = 0.01

_PAIR = re.compile(r"X[+=](\d+), Y[+=](\d+)", re.ASCII)


def parse(text):
    """Read machines as ``((ax, ay), (bx, by), (prize_x, prize_y))`` triples."""
    pairs = [
        (int(x), int(y))
        for line in text.split("\n")
        if line
        for x, y in _PAIR.findall(line)
    ]
    if not pairs or len(pairs) % 3:
        raise ValueError("expected groups of button A, button B and prize")
    groups = [iter(pairs)] * 3
    return list(zip(*groups))


def _round(value):
    """Round a non-negative float half away from zero."""
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def token_cost(machines, offset):
    """Total tokens to win every winnable prize.

    With ``offset`` each prize coordinate is moved by ``OFFSET``. Machines
    whose buttons are parallel are skipped.
    """
    total = 0
    for (ax, ay), (bx, by), (tx, ty) in machines:
        if offset:
            tx += OFFSET
            ty += OFFSET
        determinant = ax * by - bx * ay
        if determinant == 0:
            continue
        scale = 1.0 / float(determinant)
        a = scale * float(tx * by - ty * bx)
        b = scale * float(ty * ax - tx * ay)
        if a < 0 or b < 0:
            continue
        a_presses = _round(a)
        b_presses = _round(b)
        if abs(a_presses - a) >= _EPSILON or abs(b_presses - b) >= _EPSILON:
            continue
        total += a_presses * A_COST + b_presses * B_COST
    return total


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    machines = parse(Path(path).read_text())
    print(f"Part 1: {token_cost(machines, False)}")
    print(f"Part 2: {token_cost(machines, True)}")


if __name__ == "__main__":
    main()