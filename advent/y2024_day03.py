"""Corrupted memory: multiplication instructions with do/don't toggles."""

import re
import sys
from pathlib import Path

_INSTRUCTION = re.compile(r"mul\(\d+,\d+\)|do\(\)|don't\(\)", re.ASCII)
_MUL = re.compile(r"mul\((\d+),(\d+)\)", re.ASCII)


def instructions(text):
    """Extract ``mul(a,b)``, ``do()`` and ``don't()`` instructions in order.

    Line breaks are removed first, so instructions may span lines.
    """
    joined = "".join(text.split("\n"))
    return [match.group(0) for match in _INSTRUCTION.finditer(joined)]


def sum_products(instructions, honour_toggles):
    """Sum the enabled multiplications.

    With ``honour_toggles`` a ``don't()`` disables later multiplications
    until a ``do()`` enables them again.
    """
    total = 0
    enabled = True
    for instruction in instructions:
        if instruction.startswith("m"):
            if enabled:
                total += sum(
                    int(a) * int(b) for a, b in _MUL.findall(instruction)
                )
        elif honour_toggles:
            enabled = len(instruction) == 4
    return total


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    found = instructions(Path(path).read_text())
    print(f"Part 1: {sum_products(found, False)}")
    print(f"Part 2: {sum_products(found, True)}")


if __name__ == "__main__":
    main()