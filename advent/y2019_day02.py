"""A minimal Intcode machine supporting add, multiply and halt."""

import operator
import sys
from pathlib import Path

TARGET_OUTPUT = 19690720

_OPERATIONS = {1: operator.add, 2: operator.mul}
_HALT = 99


class IntcodeError(RuntimeError):
    """Raised when a program cannot be executed."""


def parse_program(text):
    """Parse comma separated integers into a program."""
    return [int(piece) for piece in text.split(",") if piece]


def _load(memory, address):
    if not 0 <= address < len(memory):
        raise IntcodeError(f"address {address} is out of range")
    return memory[address]


def run(program):
    """Execute a program and return its final memory; the input is left untouched."""
    memory = list(program)
    pc = 0
    while True:
        if pc > len(memory):
            raise IntcodeError("unexpected end of program")
        opcode = _load(memory, pc)
        if opcode == _HALT:
            return memory
        operation = _OPERATIONS.get(opcode)
        if operation is None:
            raise IntcodeError(f"unknown opcode {opcode} at {pc}")
        left = _load(memory, _load(memory, pc + 1))
        right = _load(memory, _load(memory, pc + 2))
        target = _load(memory, pc + 3)
        _load(memory, target)
        memory[target] = operation(left, right)
        pc += 4


def _run_with(program, noun, verb):
    memory = list(program)
    memory[1] = noun
    memory[2] = verb
    return run(memory)[0]


def part1(program):
    """Output of the program restored to the 1202 alarm state."""
    return _run_with(program, 12, 2)


def part2(program):
    """Find ``100 * noun + verb`` producing the target output, or 0."""
    for noun in range(100):
        for verb in range(100):
            if _run_with(program, noun, verb) == TARGET_OUTPUT:
                return 100 * noun + verb
    return 0


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("usage: y2019_day02 INPUT")
    program = parse_program(Path(args[0]).read_text())
    print(f"Part 1: {part1(program)}")
    print(f"Part 2: {part2(program)}")


if __name__ == "__main__":
    main()