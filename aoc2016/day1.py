"""Taxicab walk: follow turn-and-step instructions on a grid."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INSTRUCTION = re.compile(r"([LR])([+-]?[0-9]+)")


class Rotation(Enum):
    """Which way to turn before walking."""

    CLOCKWISE = "R"
    COUNTER_CLOCKWISE = "L"


class Direction(Enum):
    """Compass heading, valued by its unit step (dx, dy); listed clockwise."""

    NORTH = (0, 1)
    EAST = (1, 0)
    SOUTH = (0, -1)
    WEST = (-1, 0)

    def turn(self, rotation: Rotation) -> Direction:
        """Return the heading after a quarter turn."""
        headings = list(Direction)
        step = 1 if rotation is Rotation.CLOCKWISE else -1
        return headings[(headings.index(self) + step) % len(headings)]


@dataclass(frozen=True)
class Instruction:
    """Turn, then walk ``count`` blocks."""

    rotation: Rotation
    count: int


def parse_input(text: str) -> list[Instruction]:
    """Parse a comma-and-space separated list such as ``R2, L3``."""
    instructions = []
    for token in text.split(", "):
        match = _INSTRUCTION.fullmatch(token)
        if match is None:
            raise ValueError(f"invalid instruction: {token!r}")
        count = int(match.group(2))
        if not _I32_MIN <= count <= _I32_MAX:
            raise ValueError(f"step count out of range: {token!r}")
        instructions.append(Instruction(Rotation(match.group(1)), count))
    return instructions


def solve(instructions: list[Instruction]) -> tuple[int, int | None]:
    """Return the final distance and the distance of the first place visited twice."""
    visited: set[tuple[int, int]] = set()
    first_visited_twice: tuple[int, int] | None = None
    x = y = 0
    heading = Direction.NORTH

    for instruction in instructions:
        heading = heading.turn(instruction.rotation)
        dx, dy = heading.value
        for _ in range(instruction.count):
            visited.add((x, y))
            x += dx
            y += dy
            if first_visited_twice is None and (x, y) in visited:
                first_visited_twice = (x, y)

    result1 = abs(x) + abs(y)
    result2 = None
    if first_visited_twice is not None:
        result2 = abs(first_visited_twice[0]) + abs(first_visited_twice[1])
    return result1, result2


def _format_option(value: int | None) -> str:
    return "None" if value is None else f"Some({value})"


def main(argv: list[str] | None = None) -> None:
    """Solve the puzzle for the input file named on the command line."""
    parser = argparse.ArgumentParser(prog="day1")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)

    try:
        contents = args.input.read_text()
    except OSError as exc:
        parser.error(f"could not read input file: {exc}")
    try:
        instructions = parse_input(contents.strip())
    except ValueError as exc:
        parser.error(f"could not parse file: {exc}")

    result1, result2 = solve(instructions)
    print(f"Part 1: {result1}")
    print(f"Part 2: {_format_option(result2)}")


if __name__ == "__main__":
    main()