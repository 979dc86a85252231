"""Reactor safety reports."""

import sys
from itertools import pairwise
from pathlib import Path


def parse(text):
    """Read one report of space separated levels per line."""
    reports = []
    for line in text.split("\n"):
        levels = [int(piece) for piece in line.split(" ") if piece]
        if levels:
            reports.append(levels)
    return reports


def is_safe(report, tolerate):
    """Check that levels move steadily by 1 to 3 in one direction.

    With ``tolerate`` a single bad level may be removed.
    """
    if len(report) < 2:
        raise ValueError("a report needs at least two levels")
    increasing = report[1] > report[0]
    for index, (previous, value) in enumerate(pairwise(report), start=1):
        diff = value - previous
        steady = 0 < diff <= 3 if increasing else -3 <= diff < 0
        if not steady:
            if not tolerate:
                return False
            return any(
                is_safe(report[:removed] + report[removed + 1:], False)
                for removed in range(index + 1)
            )
    return True


def count_safe(reports, tolerate):
    """Number of safe reports."""
    return sum(1 for report in reports if is_safe(report, tolerate))


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    reports = parse(Path(path).read_text())
    print(f"Part 1: {count_safe(reports, False)}")
    print(f"Part 2: {count_safe(reports, True)}")


if __name__ == "__main__":
    main()