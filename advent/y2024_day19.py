"""Towel patterns: which designs can be made, and in how many ways."""

import sys
from pathlib import Path

COLOURS = frozenset("wubrg")


def _check(stripes):
    unknown = set(stripes) - COLOURS
    if unknown:
        raise ValueError(f"unknown colours {sorted(unknown)} in {stripes!r}")


def parse(text):
    """Return ``(patterns, designs)``: the first line lists patterns, the rest designs."""
    lines = [line for line in text.split("\n") if line]
    if not lines:
        raise ValueError("missing towel patterns")
    patterns = lines[0].split(", ")
    designs = lines[1:]
    for stripes in (*patterns, *designs):
        _check(stripes)
    return patterns, designs


def arrangements(patterns, designs):
    """Return ``(possible, total)``.

    ``possible`` counts designs that can be built from the patterns and
    ``total`` sums the number of ways to build each of them.
    """
    if any(not pattern for pattern in patterns):
        raise ValueError("patterns must not be empty")
    memo = {"": 1}

    def ways(design):
        if design not in memo:
            memo[design] = sum(
                ways(design[len(pattern):])
                for pattern in patterns
                if design.startswith(pattern)
            )
        return memo[design]

    possible = total = 0
    for design in designs:
        found = ways(design)
        if found:
            possible += 1
            total += found
    return possible, total


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    patterns, designs = parse(Path(path).read_text())
    possible, total = arrangements(patterns, designs)
    print(f"Part 1: {possible}")
    print(f"Part 2: {total}")


if __name__ == "__main__":
    main()