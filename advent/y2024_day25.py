"""Code chronicle: which keys fit which locks."""

import sys
from pathlib import Path

PINS = 5
SPACE = 5


def parse(text):
    """Return ``(keys, locks)`` as lists of pin heights.

    Schematics are separated by blank lines; one is only recorded when a
    blank line follows it. A schematic whose top row starts with ``.`` is a
    key.
    """
    keys = []
    locks = []
    is_key = False
    started = False
    heights = [0] * PINS
    for line in text.split("\n"):
        if not line:
            if is_key:
                keys.append([height - 1 for height in heights])
            else:
                locks.append(list(heights))
            started = False
            heights = [0] * PINS
            continue
        if not started:
            is_key = line[0] == "."
            started = True
            continue
        for column, char in enumerate(line):
            if char != "#":
                continue
            if column >= PINS:
                raise ValueError(f"schematic row {line!r} is too wide")
            heights[column] += 1
    return keys, locks


def count_fits(keys, locks):
    """Number of key and lock pairs whose pins never overlap."""
    return sum(
        1
        for key in keys
        for lock in locks
        if all(k + l <= SPACE for k, l in zip(key[:PINS], lock[:PINS]))
    )


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    keys, locks = parse(Path(path).read_text())
    print(f"Part 1: {count_fits(keys, locks)}")


if __name__ == "__main__":
    main()