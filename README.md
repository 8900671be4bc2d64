# adventpuzzles

Solutions to daily programming puzzles from the 2017, 2018, 2019 and 2024
calendars, together with a few reusable building blocks they share.

Each puzzle lives in its own module under a year sub-package
(`adventpuzzles.y2017`, `adventpuzzles.y2018`, `adventpuzzles.y2019`,
`adventpuzzles.y2024`). Most modules have a `solve` function that takes the
puzzle input as text, or the numbers the puzzle is built around, and returns
the answers as a tuple. Smaller functions for each step of a solution are
public too. Nothing is printed and no file is read behind your back: you
pass the input in and get values back.

## Shared building blocks

- `adventpuzzles.inputs` – `read_lines(path)` returns the lines of a text
  file without line endings; `read_byte_lines(path)` splits the raw bytes on
  every newline.
- `adventpuzzles.graph` – `parse_edges(lines)` reads `a <-> b, c` lines and
  `node_sets(edges)` returns the connected groups as sets.
- `adventpuzzles.knothash` – the knot hash: `sparse`, `dense`, `to_hex`
  and `knot_hash(text)`.
- `adventpuzzles.cpu` – a small register machine: `parse_instruction`,
  `load_program` and `CPU`. `CPU.execute()` runs until the program ends
  (`True`) or waits on `rcv` with nothing in `received` (`False`); `snd`
  appends to `sent`. With `debug=True` the operations run are tallied in
  `counts`.
- `adventpuzzles.intcode` – the Intcode virtual machine. `Program.run(inputs)`
  is a generator of outputs; it raises `EOFError` when the program asks for
  input that is not there.

## Puzzles

| Year | Modules |
|------|---------|
| 2017 | `day02`–`day13`, `day15`–`day17`, `day19`–`day25` |
| 2018 | `day01`, `day03`, `day05`, `day09` |
| 2019 | `day01`, `day02`, `day04`, `day06`, `day07`, `day08`, `day14`, `day16` |
| 2024 | `day01`, `day02`, `day03`, `day05`, `day07`, `day11` |

A few have defaults holding a fixed puzzle input, so they can be called with
no arguments: `y2017.day03.solve()`, `y2017.day06.solve()`,
`y2017.day10.solve()`, `y2017.day15.solve()`, `y2017.day17.solve()`,
`y2017.day25.run()`, `y2019.day04.solve()` and `y2024.day11.solve()`. Some of
these run tens of millions of steps and take a while in pure Python.

The 2019 Intcode puzzles (`day02`, `day07`) accept the program either as
comma-separated text or as a sequence of integers.

## Examples

```python
from adventpuzzles.knothash import knot_hash

knot_hash("")        # 'a2582a3a0e66e6e86e3812dcb672a272'
knot_hash("1,2,3")   # '3efbe78a8d82f29979031a4aa0b16a9d'
```

```python
from adventpuzzles.y2018.day09 import high_score

high_score(10, 1618)  # 8317
```

```python
from adventpuzzles.inputs import read_lines
from adventpuzzles.y2024 import day01

text = "\n".join(read_lines("input.txt"))
print(day01.solve(text))  # (total distance, similarity score)
```

Running an Intcode program with a list of inputs:

```python
from adventpuzzles.intcode import Program

list(Program([3, 0, 4, 0, 99]).run([42]))  # [42]
```

## What it does not do

There is no command-line program: the package installs no command, and you
call the functions from Python yourself. It does not fetch or store puzzle
inputs; load them with `adventpuzzles.inputs` or any other way and pass the
text in. Only the puzzles listed above are covered.

## Requirements

Python 3.10 or later. The package has no third-party dependencies; the test
suite uses pytest (`pip install .[test]`).