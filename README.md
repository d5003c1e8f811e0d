# aoc2016

Solutions to the first four puzzles of Advent of Code 2016. Each day is a
small command that reads a puzzle input file and prints both answers.

## Installation

```
pip install .
```

## Usage

Give each command the path to your puzzle input:

```
aoc2016-day1 input.txt
aoc2016-day2 input.txt
aoc2016-day3 input.txt
aoc2016-day4 input.txt
```

Each command prints two lines:

```
Part 1: ...
Part 2: ...
```

If the file cannot be read or parsed, the command prints an error and
exits with a non-zero status.

- **Day 1** (`aoc2016.day1`): follows a list of turns such as `R2, L3`,
  starting north at the origin. Part 1 is the taxicab distance to the
  final position. Part 2 is the distance to the first position visited
  twice, printed as `Some(n)`, or `None` if no position is visited twice.
- **Day 2** (`aoc2016.day2`): follows lines of `U`/`D`/`L`/`R` moves,
  one key per line, starting on `5`. Part 1 uses the 3×3 keypad
  (`SQUARE_KEYPAD`), part 2 the diamond-shaped one (`DIAMOND_KEYPAD`).
  Moves that would leave the keypad are ignored.
- **Day 3** (`aoc2016.day3`): counts possible triangles. The input must have
  three numbers per row and a row count that is a multiple of three.
  Part 1 reads the rows, part 2 reads each column in groups of three.
- **Day 4** (`aoc2016.day4`): parses entries such as
  `aaaaa-bbb-z-y-x-123[abxyz]`. Part 1 is the sum of the sector IDs of
  real rooms, whose checksum lists their most common letters with ties in
  alphabetical order. Part 2 is the sector ID of the first real room whose
  decrypted name contains `object`, printed as `Some(n)`, or `None` if
  there is no such room.

## Library use

The modules can also be used from Python:

```python
from aoc2016 import day1, day2, day3, day4

print(day1.solve(day1.parse_input("R5, L5, R5, R3")))   # (12, None)
print(day2.part1(day2.parse_instructions("ULL\nRRDDD\nLURDL\nUUUUD")))  # 1985
print(day3.Triangle(5, 10, 25).is_possible())           # False
print(day4.decrypt_name("qzmt-zixmtkozy-ivhz", 343))    # very encrypted name

room = day4.Room.parse("aaaaa-bbb-z-y-x-123[abxyz]")
print(room.is_real(), room.decrypted_name)
```

The parsing functions (`day1.parse_input`, `day2.parse_instructions`,
`day3.parse_input`, `day4.Room.parse`) raise `ValueError` on malformed
input.

## Tests

```
pip install .[test]
pytest
```