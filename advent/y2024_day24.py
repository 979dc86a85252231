"""Crossed wires: simulating a circuit of logic gates."""

import re
import sys
from enum import Enum
from pathlib import Path

_INPUT = re.compile(r"([xy]\d\d): (\d)")
_GATE = re.compile(r"(\w+) (\w+) (\w+) -> (\w+)")


class Operation(Enum):
    AND = "AND"
    OR = "OR"
    XOR = "XOR"

    def apply(self, left, right):
        """Combine two wire values."""
        if self is Operation.AND:
            return left and right
        if self is Operation.OR:
            return left or right
        return left != right


def parse(text):
    """Return ``(inputs, gates)``.

    ``inputs`` maps wire names to booleans; ``gates`` maps each output wire
    to ``(left, Operation, right)``. Inputs end at the first empty line.
    """
    inputs = {}
    gates = {}
    reading_inputs = True
    for line in text.split("\n"):
        if not line:
            reading_inputs = False
            continue
        if reading_inputs:
            for wire, value in _INPUT.findall(line):
                inputs[wire] = int(value) != 0
        else:
            for left, name, right, target in _GATE.findall(line):
                try:
                    operation = Operation(name)
                except ValueError:
                    raise ValueError(f"unexpected operation {name!r}") from None
                gates[target] = (left, operation, right)
    return inputs, gates


def simulate(inputs, gates):
    """The number formed by the ``z`` wires, ``z00`` being the lowest bit."""
    values = dict(inputs)
    resolving = set()

    def value(wire):
        if wire in values:
            return values[wire]
        if wire in resolving:
            raise ValueError(f"wire {wire} depends on itself")
        try:
            left, operation, right = gates[wire]
        except KeyError:
            raise ValueError(f"wire {wire} has no value") from None
        resolving.add(wire)
        result = operation.apply(value(left), value(right))
        resolving.discard(wire)
        values[wire] = result
        return result

    outputs = sorted(wire for wire in gates if wire.startswith("z"))
    return sum(int(value(wire)) << bit for bit, wire in enumerate(outputs))


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    inputs, gates = parse(Path(path).read_text())
    print(f"Part 1: {simulate(inputs, gates)}")


if __name__ == "__main__":
    main()