"""Counting stones that split and change with every blink."""

import sys
from pathlib import Path

PART1_BLINKS = 25
PART2_BLINKS = 75


def parse(text):
    """Read the space separated stone numbers."""
    stones = []
    for line in text.split("\n"):
        if not line:
            continue
        for piece in line.split(" "):
            if not piece:
                continue
            value = int(piece)
            if value < 0:
                raise ValueError(f"negative stone {value}")
            stones.append(value)
    return stones


def count_stones(stones, blinks):
    """Number of stones after ``blinks`` blinks.

    A 0 becomes 1; a number with an even count of digits splits into its two
    halves; any other number is multiplied by 2024.
    """
    memo = {}

    def expand(value, remaining):
        if remaining <= 0:
            return 1
        key = (value, remaining)
        if key in memo:
            return memo[key]
        if value == 0:
            result = expand(1, remaining - 1)
        else:
            digits = len(str(value))
            if digits % 2 == 0:
                mask = 10 ** (digits // 2)
                result = expand(value // mask, remaining - 1) + expand(
                    value % mask, remaining - 1
                )
            else:
                result = expand(value * 2024, remaining - 1)
        memo[key] = result
        return result

    return sum(expand(stone, blinks) for stone in stones)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    stones = parse(Path(path).read_text())
    print(f"Part 1: {count_stones(stones, PART1_BLINKS)}")
    print(f"Part 2: {count_stones(stones, PART2_BLINKS)}")


if __name__ == "__main__":
    main()