"""Bridge repair calibration equations."""

import sys
from pathlib import Path


def parse(text):
    """Read ``target: v1 v2 ...`` lines into ``(target, values)`` pairs."""
    equations = []
    for line in text.split("\n"):
        if not line:
            continue
        parts = line.split(":")
        target = int(parts[0])
        values = [int(piece) for piece in parts[1].split(" ") if piece]
        equations.append((target, values))
    return equations


def _strip_suffix(target, suffix):
    """Remove ``suffix``'s digits from the end of ``target``, or ``None`` on mismatch."""
    while suffix > 0 and target > 0:
        if suffix % 10 != target % 10:
            return None
        target //= 10
        suffix //= 10
    return target


def _reach(target, values, concatenation):
    if len(values) == 1:
        return values[0] == target
    if not values:
        return False
    last, rest = values[0], values[1:]
    if target - last >= 0 and _reach(target - last, rest, concatenation):
        return True
    if target % last == 0 and _reach(target // last, rest, concatenation):
        return True
    if concatenation:
        remaining = _strip_suffix(target, last)
        if remaining is not None and _reach(remaining, rest, concatenation):
            return True
    return False


def can_reach(target, values, concatenation):
    """Whether left-to-right ``+``, ``*`` (and optionally ``||``) can make ``target``."""
    return _reach(target, list(reversed(values)), concatenation)


def calibration_total(equations, concatenation):
    """Sum of targets of the equations that can be satisfied."""
    return sum(
        target for target, values in equations if can_reach(target, values, concatenation)
    )


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    equations = parse(Path(path).read_text())
    print(f"Part 1: {calibration_total(equations, False)}")
    print(f"Part 2: {calibration_total(equations, True)}")


if __name__ == "__main__":
    main()