"""Intcode machine with parameter modes, I/O, jumps and comparisons."""

import operator
import sys
from pathlib import Path

_BINARY = {
    1: operator.add,
    2: operator.mul,
    7: lambda left, right: int(left < right),
    8: lambda left, right: int(left == right),
}


class IntcodeError(RuntimeError):
    """Raised when a program cannot be executed."""


def parse_program(text):
    """Parse comma separated integers into address-indexed memory."""
    values = [int(piece) for piece in text.split(",") if piece]
    return dict(enumerate(values))


def decode(instruction):
    """Split an instruction into ``((first, second, third) modes, opcode)``."""
    sign = -1 if instruction < 0 else 1
    magnitude = abs(instruction)
    opcode = sign * (magnitude % 100)
    modes = tuple(sign * (magnitude // place % 10) for place in (100, 1000, 10000))
    return modes, opcode


def _load(memory, address):
    try:
        return memory[address]
    except KeyError:
        raise IntcodeError(f"no value at address {address}") from None


def _param(memory, address, mode):
    if mode == 0:
        return _load(memory, _load(memory, address))
    if mode == 1:
        return _load(memory, address)
    raise IntcodeError(f"unexpected parameter mode {mode}")


def run(program, read_input, write_output):
    """Execute a program and return its final memory.

    ``read_input`` is called for each input instruction and must return an
    integer; ``write_output`` receives each output value.
    """
    memory = dict(program)
    pc = 0
    while True:
        if pc > len(memory):
            raise IntcodeError("unexpected end of program")
        (first, second, _), opcode = decode(_load(memory, pc))
        if opcode in _BINARY:
            left = _param(memory, pc + 1, first)
            right = _param(memory, pc + 2, second)
            target = _param(memory, pc + 3, 1)
            memory[target] = _BINARY[opcode](left, right)
            pc += 4
        elif opcode == 3:
            target = _param(memory, pc + 1, 1)
            memory[target] = read_input()
            pc += 2
        elif opcode == 4:
            write_output(_param(memory, pc + 1, first))
            pc += 2
        elif opcode in (5, 6):
            condition = _param(memory, pc + 1, first)
            target = _param(memory, pc + 2, second)
            if (condition != 0) == (opcode == 5):
                pc = target
            else:
                pc += 3
        else:
            return memory


def _prompt():
    return int(input("> ").strip())


def _show(value):
    print(f">> {value}")


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("usage: y2019_day05 INPUT")
    program = parse_program(Path(args[0]).read_text())
    run(program, _prompt, _show)


if __name__ == "__main__":
    main()