"""Three-bit computer: running programs and searching for a quine."""

import sys
from itertools import count
from pathlib import Path

# Low 30 bits of register A that were found to start the search well.
QUINE_PATTERNS = (
    0b101000011110110000001110011011,
    0b101000011110110000001110011101,
    0b101000011110110010001110011011,
    0b101000011110110010001110011101,
    0b101001011110110000001110011011,
    0b101001011110110000001110011101,
    0b101001011110110010001110011011,
    0b101001011110110010001110011101,
)
_PATTERN_BITS = 30


def parse(text):
    """Return ``(program, a, b, c)`` from the register and program lines."""
    lines = text.split("\n")
    if len(lines) < 5:
        raise ValueError("expected three registers, a blank line and a program")
    a, b, c = (int(line[12:]) for line in lines[:3])
    program = [int(piece) for piece in lines[4][9:].split(",")]
    return program, a, b, c


def _execute(program, a, b, c):
    """Yield each output value as the program runs."""
    pointer = 0
    while pointer < len(program):
        if pointer + 1 >= len(program):
            raise ValueError(f"instruction at {pointer} has no operand")
        opcode = program[pointer]
        literal = program[pointer + 1]
        combo = {4: a, 5: b, 6: c}.get(literal, literal if literal <= 3 else 0)
        pointer += 2
        if opcode == 0:
            a >>= combo
        elif opcode == 1:
            b ^= literal
        elif opcode == 2:
            b = combo % 8
        elif opcode == 3:
            if a != 0:
                pointer = literal
        elif opcode == 4:
            b ^= c
        elif opcode == 5:
            yield combo % 8
        elif opcode == 6:
            b = a >> combo
        elif opcode == 7:
            c = a >> combo
        else:
            raise ValueError(f"unknown opcode {opcode}")


def run(program, a, b, c):
    """Run the program with the given registers and return its outputs."""
    return list(_execute(program, a, b, c))


def _outputs_itself(program, a, b, c):
    produced = 0
    for value in _execute(program, a, b, c):
        if produced >= len(program) or value != program[produced]:
            return False
        produced += 1
    return produced == len(program)


def find_quine(program, b, c):
    """Smallest searched register A value for which the program prints itself.

    Candidates are the known low-bit patterns with increasing high bits, so
    the search only ends for programs those patterns suit.
    """
    for high in count():
        for pattern in QUINE_PATTERNS:
            candidate = pattern + (high << _PATTERN_BITS)
            if _outputs_itself(program, candidate, b, c):
                return candidate
    return 0


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    program, a, b, c = parse(Path(path).read_text())
    print("Part 1: " + ",".join(str(value) for value in run(program, a, b, c)))
    print(f"Part 2: {find_quine(program, b, c)}")


if __name__ == "__main__":
    main()