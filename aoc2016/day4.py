"""Room names with checksums and a shift cipher."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

_ROOM = re.compile(r"([A-Za-z]+(?:-[A-Za-z]+)*)-([0-9]+)\[([a-z]{5})\]")
_U32_MAX = 2**32 - 1
_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def decrypt_name(name: str, sector_id: int) -> str:
    """Shift each letter forward by ``sector_id`` and turn dashes into spaces."""
    chars = []
    for char in name:
        if char == "-":
            chars.append(" ")
            continue
        index = _ALPHABET.find(char)
        if index < 0:
            raise ValueError(f"cannot decrypt character {char!r}")
        chars.append(_ALPHABET[(index + sector_id) % 26])
    return "".join(chars)


@dataclass(frozen=True)
class Room:
    """A room entry: name, its decryption, sector id and five-letter checksum."""

    encrypted_name: str
    decrypted_name: str
    sector_id: int
    checksum: tuple[str, ...]

    @classmethod
    def create(cls, encrypted_name: str, sector_id: int, checksum) -> Room:
        """Build a room, decrypting its name."""
        checksum = tuple(checksum)
        if len(checksum) != 5:
            raise ValueError("checksum must have exactly 5 letters")
        return cls(
            encrypted_name=encrypted_name,
            decrypted_name=decrypt_name(encrypted_name, sector_id),
            sector_id=sector_id,
            checksum=checksum,
        )

    @classmethod
    def parse(cls, text: str) -> Room:
        """Parse an entry such as ``aaaaa-bbb-z-y-x-123[abxyz]``."""
        match = _ROOM.fullmatch(text)
        if match is None:
            raise ValueError(f"invalid room: {text!r}")
        name, digits, checksum = match.groups()
        sector_id = int(digits)
        if sector_id > _U32_MAX:
            raise ValueError(f"sector id out of range: {text!r}")
        return cls.create(name, sector_id, checksum)

    def is_real(self) -> bool:
        """True when the checksum lists the most common letters, ties alphabetical."""
        counts = Counter(char for char in self.encrypted_name if char != "-")
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return all(char == expected for (char, _), expected in zip(ranked, self.checksum))


def _format_option(value: int | None) -> str:
    return "None" if value is None else f"Some({value})"


def main(argv: list[str] | None = None) -> None:
    """Solve the puzzle for the input file named on the command line."""
    parser = argparse.ArgumentParser(prog="day4")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)

    try:
        contents = args.input.read_text()
    except OSError as exc:
        parser.error(f"could not read input file: {exc}")
    try:
        rooms = [Room.parse(line.strip()) for line in contents.strip().splitlines()]
    except ValueError as exc:
        parser.error(f"could not process input: {exc}")

    real_rooms = [room for room in rooms if room.is_real()]
    print(f"Part 1: {sum(room.sector_id for room in real_rooms)}")

    storage = next(
        (room.sector_id for room in real_rooms if "object" in room.decrypted_name),
        None,
    )
    print(f"Part 2: {_format_option(storage)}")


if __name__ == "__main__":
    main()