"""Advent of Code 2024 solvers for days 1 to 12, with shared parsing and grid helpers."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "grid",
    "parse",
    "textscan",
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
    "day09",
    "day10",
    "day11",
    "day12",
]