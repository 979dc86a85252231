"""Monkey market: pseudorandom secrets and the best selling sequence."""

import sys
from collections import Counter, deque
from pathlib import Path

MODULUS = 16777216
ITERATIONS = 2000
_U64 = (1 << 64) - 1


def parse(text):
    """Read one initial secret per line."""
    return [int(line) for line in text.split("\n") if line]


def _step(secret):
    secret = (secret ^ ((secret << 6) & _U64)) % MODULUS
    secret = (secret ^ (secret >> 5)) % MODULUS
    return (secret ^ ((secret << 11) & _U64)) % MODULUS


def evolve(secret, iterations):
    """The secret after ``iterations`` steps of the generator."""
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    for _ in range(iterations):
        secret = _step(secret)
    return secret


def part1(secrets):
    """Sum of every buyer's 2000th secret."""
    return sum(evolve(secret, ITERATIONS) for secret in secrets)


def _first_prices(secret, iterations):
    """Price at the first occurrence of each run of four price changes."""
    prices = {}
    window = deque(maxlen=4)
    current = secret
    for _ in range(iterations):
        following = _step(current)
        window.append(following % 10 - current % 10)
        current = following
        if len(window) == 4:
            prices.setdefault(tuple(window), current % 10)
    return prices


def part2(secrets):
    """Most bananas one sequence of four price changes can buy."""
    totals = Counter()
    for secret in secrets:
        totals.update(_first_prices(secret, ITERATIONS))
    return max(totals.values(), default=0)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    secrets = parse(Path(path).read_text())
    print(f"Part 1: {part1(secrets)}")
    print(f"Part 2: {part2(secrets)}")


if __name__ == "__main__":
    main()