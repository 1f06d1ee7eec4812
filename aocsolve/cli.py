"""Command line entry point: solve one part of one day for an input file."""

from __future__ import annotations

import argparse
import sys
from types import ModuleType

from aocsolve import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
)

_DAYS: dict[int, ModuleType] = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    12: day12,
}

PARTS = ("a", "b")


def run(day: int, part: str, text: str) -> int:
    """Solve ``part`` ("a" or "b") of ``day`` for the given input text."""
    module = _DAYS.get(day)
    if module is None:
        raise ValueError(f"no solution for day {day}")
    if part not in PARTS:
        raise ValueError(f"unknown part {part!r}")
    solver = module.part_a if part == "a" else module.part_b
    return solver(text)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="aocsolve", description=__doc__)
    parser.add_argument("day", type=int, choices=sorted(_DAYS))
    parser.add_argument("part", choices=PARTS)
    parser.add_argument("input_file")
    args = parser.parse_args(argv)

    try:
        with open(args.input_file, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError:
        print(f"Error: Couldn't open file '{args.input_file}'")
        return 1

    print(run(args.day, args.part, text))
    return 0


if __name__ == "__main__":
    sys.exit(main())