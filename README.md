# aocsolve

Solvers for days 1 to 12 of the 2024 Advent of Code puzzles, together with the
small building blocks they share: a string scanner, a 2D vector and grid type,
and a set of line-oriented text helpers.

No third-party libraries are needed at run time.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

The `aocsolve` command reads a puzzle input file and prints the answer for the
chosen day (1 to 12) and part (`a` or `b`):

```
aocsolve 1 a input.txt
aocsolve 11 b input.txt
```

If the file cannot be opened it prints `Error: Couldn't open file '<name>'`
and exits with status 1. Run `aocsolve --help` for the usage summary.

## Library use

Every day lives in its own module (`aocsolve.day01` to `aocsolve.day12`) and
offers `part_a(text)` and `part_b(text)`, each taking the whole puzzle input as
a string and returning an integer:

```python
from aocsolve import day01, day07

text = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
print(day01.part_a(text))  # 11: total distance between the sorted lists
print(day01.part_b(text))  # 31: similarity score

print(day07.solvable(190, [10, 19], False))  # True: 10 * 19
```

`aocsolve.cli.run(day, part, text)` dispatches to the right solver and raises
`ValueError` for an unknown day or part.

The days also expose their intermediate steps, for example
`day02.is_safe` and `day02.is_safe_with_dampener`, `day05.RuleSet` with
`manual_valid` and `repair_manual`, `day06.count_visited` and
`day06.count_loop_obstacles`, `day08.find_antinodes`,
`day09.compact_blocks`, `day09.compact_files` and `day09.checksum`,
`day10.trailhead_score` and `day10.trailhead_rating`, `day11.blink` and
`day11.count_after`, and `day12.fencing_price` and `day12.discounted_price`.

The lower-level pieces are usable on their own:

- `aocsolve.parse.Scanner` walks through a string, consuming prefixes,
  newlines and integers, and raises `ParseError` when a required token is
  missing.
- `aocsolve.grid.Vec2` and `aocsolve.grid.Grid` give a hashable 2D vector and a
  rectangular grid with bounds checks, `at_or` lookups, `set_all`, `copy` and
  row-major `positions()`. The unit directions are `UP`, `DOWN`, `LEFT` and
  `RIGHT`, and `direction_to_idx` maps them to 0 to 3.
- `aocsolve.textscan` holds a character `Cursor` for line parsing (raising
  `ScanError` on missing tokens), file and section splitting (`read_lines`,
  `split_at_empty_lines`), environment switches (`env_flag`, `env_int`) and
  simple prefixed log output to standard output (`info`, `debug`, `debug2`,
  `debug_ints`), where the debug levels follow the `DEBUG` environment
  variable.

## What it does not do

Only days 1 to 12 of 2024 are covered. The command solves one part of one day
per run; it does not fetch puzzle inputs or submit answers.