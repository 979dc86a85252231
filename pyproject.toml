[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent"
version = "0.1.0"
description = "Solvers for Advent of Code puzzles from the 2019 and 2024 events"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "intcode", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent-2019-01 = "advent.y2019_day01:main"
advent-2019-02 = "advent.y2019_day02:main"
advent-2019-03 = "advent.y2019_day03:main"
advent-2019-04 = "advent.y2019_day04:main"
advent-2019-05 = "advent.y2019_day05:main"
advent-2019-06 = "advent.y2019_day06:main"
advent-2019-08 = "advent.y2019_day08:main"
advent-2024-01 = "advent.y2024_day01:main"
advent-2024-02 = "advent.y2024_day02:main"
advent-2024-03 = "advent.y2024_day03:main"
advent-2024-04 = "advent.y2024_day04:main"
advent-2024-05 = "advent.y2024_day05:main"
advent-2024-07 = "advent.y2024_day07:main"
advent-2024-08 = "advent.y2024_day08:main"
advent-2024-09 = "advent.y2024_day09:main"
advent-2024-10 = "advent.y2024_day10:main"
advent-2024-11 = "advent.y2024_day11:main"
advent-2024-12 = "advent.y2024_day12:main"
advent-2024-13 = "advent.y2024_day13:main"
advent-2024-15 = "advent.y2024_day15:main"
advent-2024-16 = "advent.y2024_day16:main"
advent-2024-17 = "advent.y2024_day17:main"
advent-2024-18 = "advent.y2024_day18:main"
advent-2024-19 = "advent.y2024_day19:main"
advent-2024-20 = "advent.y2024_day20:main"
advent-2024-22 = "advent.y2024_day22:main"
advent-2024-23 = "advent.y2024_day23:main"
advent-2024-24 = "advent.y2024_day24:main"
advent-2024-25 = "advent.y2024_day25:main"

[tool.hatch.build.targets.wheel]
packages = ["advent"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
