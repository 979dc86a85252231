"""Historian location lists: distances and similarity scores."""

import sys
from collections import Counter
from itertools import chain, repeat
from pathlib import Path


def parse(text):
    """Read two columns separated by three spaces into left and right lists."""
    left, right = [], []
    for line in text.split("\n"):
        numbers = [int(piece) for piece in line.split("   ") if piece]
        if numbers:
            left.append(numbers[0])
        if len(numbers) > 1:
            right.append(numbers[1])
    return left, right


def total_distance(left, right):
    """Sum the distances between the lists paired smallest to smallest.

    Missing right values count as 0; extra right values are ignored.
    """
    padded = chain(sorted(right), repeat(0))
    return sum(abs(a - b) for a, b in zip(sorted(left), padded))


def similarity(left, right):
    """Sum each left value times the number of times it occurs on the right."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Example.txt"
    left, right = parse(Path(path).read_text())
    print(f"Part 1: {total_distance(left, right)}")
    print(f"Part 2: {similarity(left, right)}")


if __name__ == "__main__":
    main()