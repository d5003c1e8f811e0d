"""Count triangles whose side lengths are possible."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

_U32 = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Triangle:
    """Three side lengths."""

    a: int
    b: int
    c: int

    def is_possible(self) -> bool:
        """True when every pair of sides is longer than the third."""
        return self.a + self.b > self.c and self.b + self.c > self.a and self.a + self.c > self.b


def _parse_u32(token: str) -> int:
    if _U32.fullmatch(token) is None:
        raise ValueError(f"not an unsigned number: {token!r}")
    value = int(token)
    if value > _U32_MAX:
        raise ValueError(f"number out of range: {token!r}")
    return value


def parse_input(text: str) -> list[list[int]]:
    """Parse rows of three space-separated numbers; the row count must divide by 3."""
    grid = [
        [_parse_u32(part) for part in line.split(" ") if part]
        for line in text.strip().splitlines()
    ]
    if any(len(row) != 3 for row in grid) or len(grid) % 3 != 0:
        raise ValueError("every row needs 3 numbers and the row count must be a multiple of 3")
    return grid


def part1(grid: list[list[int]]) -> int:
    """Count possible triangles read row by row."""
    return sum(Triangle(*row).is_possible() for row in grid)


def part2(grid: list[list[int]]) -> int:
    """Count possible triangles read down each column in groups of three."""
    total = 0
    for column in zip(*grid):
        chunks = zip(*[iter(column)] * 3)
        total += sum(Triangle(*chunk).is_possible() for chunk in chunks)
    return total


def main(argv: list[str] | None = None) -> None:
    """Solve the puzzle for the input file named on the command line."""
    parser = argparse.ArgumentParser(prog="day3")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)

    try:
        contents = args.input.read_text()
    except OSError as exc:
        parser.error(f"could not read input file: {exc}")
    try:
        grid = parse_input(contents)
    except ValueError as exc:
        parser.error(f"could not parse input: {exc}")

    print(f"Part 1: {part1(grid)}")
    print(f"Part 2: {part2(grid)}")


if __name__ == "__main__":
    main()