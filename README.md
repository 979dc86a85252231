# advent

Solvers for Advent of Code puzzles: days 1–6 and 8 of the 2019 event and
many days of the 2024 event. Each day lives in its own module
(`advent.y2019_day01`, `advent.y2024_day17`, …) and can be used as a
library or run from the command line.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Every day has a command named `advent-<year>-<day>`. Give it your puzzle
input and it prints the answers:

```
advent-2024-01 input.txt
advent-2024-11 input.txt
advent-2019-02 input.txt
```

The available commands are:

- 2019: `advent-2019-01`, `advent-2019-02`, `advent-2019-03`,
  `advent-2019-04`, `advent-2019-05`, `advent-2019-06`, `advent-2019-08`
- 2024: `advent-2024-01` through `advent-2024-05`, `advent-2024-07`
  through `advent-2024-13`, `advent-2024-15` through `advent-2024-20`,
  and `advent-2024-22` through `advent-2024-25`

The 2019 commands require the input file. The 2024 commands read
`Input.txt` in the current directory when no file is given
(`advent-2024-01` reads `Example.txt` instead).

A few days work differently:

- `advent-2019-04` searches a fixed password range and takes no input
  file; pass `LOW HIGH` to search another range.
- `advent-2019-05` runs an Intcode program that asks for input on the
  terminal and prints what the program outputs.
- `advent-2019-08` takes the image width and height before the file:
  `advent-2019-08 25 6 input.txt`. It prints the checksum and then the
  rendered image.
- `advent-2024-18` uses a 70 by 70 grid and 1024 fallen bytes; give
  `INPUT WIDTH HEIGHT BYTES` to use other values.
- `advent-2024-24` prints only the number formed by the `z` wires.
- `advent-2024-25` prints only the number of fitting key and lock pairs.

## Library use

The functions take the puzzle text or already parsed data and return the
answers, so they are easy to call from your own code:

```python
from advent import y2024_day01, y2024_day11

left, right = y2024_day01.parse("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
print(y2024_day01.total_distance(left, right))   # 11
print(y2024_day01.similarity(left, right))       # 31

stones = y2024_day11.parse("125 17\n")
print(y2024_day11.count_stones(stones, 25))      # 55312
```

The 2019 Intcode computer of day 5 takes callables for its input and
output, so programs can be driven without a terminal:

```python
from advent import y2019_day05

program = y2019_day05.parse_program("3,0,4,0,99")
outputs = []
y2019_day05.run(program, lambda: 42, outputs.append)
print(outputs)  # [42]
```

## Limitations

- There is no solver for 2024 days 6, 14 and 21, nor for 2019 day 7 or
  later days other than day 8.
- `y2024_day17.find_quine` only tries register values whose low 30 bits
  match a fixed set of patterns, so it finds an answer only for programs
  those patterns suit and otherwise keeps searching.
- `y2019_day02.part2` returns 0 when no noun and verb give the target
  output.