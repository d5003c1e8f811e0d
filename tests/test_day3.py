import pytest

from aoc2016.day3 import Triangle, main, parse_input, part1, part2

INPUT = (
    "101 301 501\n"
    "102 302 502\n"
    "103 303 503\n"
    "201 401 601\n"
    "202 402 602\n"
    "203 403 603\n"
)

GRID = [
    [101, 301, 501],
    [102, 302, 502],
    [103, 303, 503],
    [201, 401, 601],
    [202, 402, 602],
    [203, 403, 603],
]


def test_triangle_impossible():
    assert Triangle(5, 10, 25).is_possible() is False


def test_triangle_degenerate_is_impossible():
    assert Triangle(1, 2, 3).is_possible() is False


def test_triangle_equilateral_is_possible():
    assert Triangle(4, 4, 4).is_possible() is True


def test_parse_input():
    assert parse_input(INPUT) == GRID


def test_parse_input_allows_extra_spaces():
    assert parse_input("  5  10   25\n1 1 1\n2 2 2\n") == [[5, 10, 25], [1, 1, 1], [2, 2, 2]]


def test_parse_input_empty_is_empty_grid():
    assert parse_input("") == []


@pytest.mark.parametrize(
    "text",
    [
        "1 2\n3 4\n5 6\n",
        "1 2 3\n4 5 6\n",
        "1 2 x\n4 5 6\n7 8 9\n",
        "1 2 -3\n4 5 6\n7 8 9\n",
        "1 2 3\n\n4 5 6\n7 8 9\n",
        "1 2 4294967296\n4 5 6\n7 8 9\n",
    ],
)
def test_parse_input_rejects_invalid(text):
    with pytest.raises(ValueError):
        parse_input(text)


def test_part1_counts_rows():
    assert part1(GRID) == 3


def test_part2_counts_columns():
    assert part2(GRID) == 6


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(INPUT)
    main([str(path)])
    assert capsys.readouterr().out == "Part 1: 3\nPart 2: 6\n"


def test_main_rejects_bad_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("1 2\n")
    with pytest.raises(SystemExit):
        main([str(path)])