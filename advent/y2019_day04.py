"""Counting six-digit passwords that satisfy the rules."""

import sys
from collections import Counter

PUZZLE_RANGE = (165432, 707912)


def is_valid_password(number, allow_repeated):
    """Check a password.

    Digits must never decrease. With ``allow_repeated`` any adjacent pair of
    equal digits suffices; otherwise some digit must appear exactly twice.
    """
    if not 100000 <= number <= 1000000:
        raise ValueError(f"{number} is not a six digit password")

    digits = [number // 10**place % 10 for place in range(5, -1, -1)]
    previous = 0
    double = False
    for digit in digits:
        if digit < previous:
            return False
        if digit == previous:
            double = True
        previous = digit

    if not allow_repeated:
        return 2 in Counter(digits).values()
    return double


def count_passwords(low, high):
    """Count valid passwords in ``low..=high`` under both rule sets."""
    lenient = strict = 0
    for number in range(low, high + 1):
        lenient += is_valid_password(number, True)
        strict += is_valid_password(number, False)
    return lenient, strict


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        low, high = PUZZLE_RANGE
    elif len(args) == 2:
        low, high = (int(arg) for arg in args)
    else:
        raise SystemExit("usage: y2019_day04 [LOW HIGH]")
    lenient, strict = count_passwords(low, high)
    print(f"Part 1: {lenient}")
    print(f"Part 2: {strict}")


if __name__ == "__main__":
    main()