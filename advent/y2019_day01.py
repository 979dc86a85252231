"""Fuel requirements for spacecraft modules."""

import sys
from pathlib import Path


def _third(value):
    """Divide by three, truncating towards zero."""
    quotient = abs(value) // 3
    return quotient if value >= 0 else -quotient


def fuel(mass, full=False):
    """Fuel needed for a module of the given mass.

    With ``full`` the fuel itself also needs fuel, added until the
    requirement drops below zero.
    """
    total = 0
    while True:
        mass = _third(mass) - 2
        if mass < 0:
            return total
        total += mass
        if not full:
            return total


def total_fuel(text, full=False):
    """Sum the fuel for every module mass listed one per line."""
    return sum(fuel(int(line), full) for line in text.split("\n") if line)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("usage: y2019_day01 INPUT")
    text = Path(args[0]).read_text()
    print(f"Part 1: {total_fuel(text, False)}")
    print(f"Part 2: {total_fuel(text, True)}")


if __name__ == "__main__":
    main()