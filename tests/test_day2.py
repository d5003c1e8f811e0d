import pytest

from aoc2016.day2 import (
    Direction,
    main,
    parse_instructions,
    part1,
    part2,
    run_instructions,
)

North = Direction.NORTH
South = Direction.SOUTH
West = Direction.WEST
East = Direction.EAST

SQUARE = [
    ["1", "2", "3"],
    ["4", "5", "6"],
    ["7", "8", "9"],
]

DIAMOND = [
    [None, None, "1", None, None],
    [None, "2", "3", "4", None],
    ["5", "6", "7", "8", "9"],
    [None, "A", "B", "C", None],
    [None, None, "D", None, None],
]

INSTRUCTIONS = [
    [North, West, West],
    [East, East, South, South, South],
    [West, North, East, South, West],
    [North, North, North, North, South],
]

TEXT = "ULL\nRRDDD\nLURDL\nUUUUD\n"


def test_run_instructions_part1():
    assert run_instructions(SQUARE, (1, 1), INSTRUCTIONS) == "1985"


def test_run_instructions_part2():
    assert run_instructions(DIAMOND, (0, 2), INSTRUCTIONS) == "5DB3"


def test_parse_instructions_matches_directions():
    assert parse_instructions(TEXT) == INSTRUCTIONS


def test_parse_instructions_rejects_unknown_letter():
    with pytest.raises(ValueError):
        parse_instructions("ULX")


def test_part1_uses_square_keypad():
    assert part1(parse_instructions(TEXT)) == "1985"


def test_part2_uses_diamond_keypad():
    assert part2(parse_instructions(TEXT)) == "5DB3"


def test_start_on_blank_is_rejected():
    with pytest.raises(ValueError):
        run_instructions(DIAMOND, (0, 0), INSTRUCTIONS)


def test_no_lines_give_empty_code():
    assert run_instructions(SQUARE, (1, 1), []) == ""


def test_empty_line_repeats_current_key():
    assert run_instructions(SQUARE, (1, 1), [[]]) == "5"


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(TEXT)
    main([str(path)])
    assert capsys.readouterr().out == "Part 1: 1985\nPart 2: 5DB3\n"


def test_main_rejects_bad_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("UXD\n")
    with pytest.raises(SystemExit):
        main([str(path)])