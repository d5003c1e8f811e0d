"""Keypad walk: follow up/down/left/right moves to find a code."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

Graph = Sequence[Sequence["str | None"]]


class Direction(Enum):
    """A move on the keypad, valued by its instruction letter."""

    NORTH = "U"
    SOUTH = "D"
    WEST = "L"
    EAST = "R"

    @property
    def offset(self) -> tuple[int, int]:
        """The (dx, dy) step of this move, y growing downwards."""
        return _OFFSETS[self]


_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.EAST: (1, 0),
}

SQUARE_KEYPAD: Graph = (
    ("1", "2", "3"),
    ("4", "5", "6"),
    ("7", "8", "9"),
)

#     1
#   2 3 4
# 5 6 7 8 9
#   A B C
#     D
DIAMOND_KEYPAD: Graph = (
    (None, None, "1", None, None),
    (None, "2", "3", "4", None),
    ("5", "6", "7", "8", "9"),
    (None, "A", "B", "C", None),
    (None, None, "D", None, None),
)


def parse_instructions(text: str) -> list[list[Direction]]:
    """Parse one line of U/D/L/R letters per key of the code."""
    try:
        return [
            [Direction(char) for char in line.strip()]
            for line in text.strip().splitlines()
        ]
    except ValueError as exc:
        raise ValueError(f"invalid character: {exc}") from None


def run_instructions(
    graph: Graph,
    start: tuple[int, int],
    instructions: Sequence[Sequence[Direction]],
) -> str:
    """Walk the keypad from ``start`` (x, y) and collect the key after each line."""
    x, y = start
    if graph[y][x] is None:
        raise ValueError(f"start position {start} is not a key")

    height = len(graph)
    keys = []
    for line in instructions:
        for direction in line:
            dx, dy = direction.offset
            nx, ny = x + dx, y + dy
            if 0 <= ny < height and 0 <= nx < len(graph[y]) and graph[ny][nx] is not None:
                x, y = nx, ny
        key = graph[y][x]
        if key is None:
            raise ValueError("invalid node")
        keys.append(key)
    return "".join(keys)


def part1(instructions: Sequence[Sequence[Direction]]) -> str:
    """Code on the square 3x3 keypad, starting at 5."""
    return run_instructions(SQUARE_KEYPAD, (1, 1), instructions)


def part2(instructions: Sequence[Sequence[Direction]]) -> str:
    """Code on the diamond keypad, starting at 5."""
    return run_instructions(DIAMOND_KEYPAD, (0, 2), instructions)


def main(argv: list[str] | None = None) -> None:
    """Solve the puzzle for the input file named on the command line."""
    parser = argparse.ArgumentParser(prog="day2")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)

    try:
        contents = args.input.read_text()
    except OSError as exc:
        parser.error(f"could not read input file: {exc}")
    try:
        instructions = parse_instructions(contents)
    except ValueError as exc:
        parser.error(str(exc))

    print(f"Part 1: {part1(instructions)}")
    print(f"Part 2: {part2(instructions)}")


if __name__ == "__main__":
    main()