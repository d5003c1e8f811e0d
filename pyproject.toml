[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2016"
version = "0.1.0"
description = "Solutions to the 2016 Advent of Code puzzles, days 1 to 4"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc2016"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2016-day1 = "aoc2016.day1:main"
aoc2016-day2 = "aoc2016.day2:main"
aoc2016-day3 = "aoc2016.day3:main"
aoc2016-day4 = "aoc2016.day4:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2016"]

[tool.pytest.ini_options]
addopts = "-ra"
