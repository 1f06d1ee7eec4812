"""Day 8: antinodes created by pairs of antennas on the same frequency."""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations

from aocsolve.grid import Grid, Vec2

EMPTY = "."


def parse(text: str) -> Grid[str]:
    """The antenna map as a grid of characters."""
    rows = text.splitlines()
    cells = [c for row in rows for c in row]
    width = max((len(row) for row in rows), default=0)
    return Grid(cells, width)


def antinode_pair(a: Vec2, b: Vec2) -> tuple[Vec2, Vec2]:
    """The two points in line with ``a`` and ``b`` at the same spacing."""
    delta = b - a
    return b + delta, a - delta


def _antennas(grid: Grid[str]) -> dict[str, list[Vec2]]:
    by_frequency: dict[str, list[Vec2]] = defaultdict(list)
    for p in grid.positions():
        if grid[p] != EMPTY:
            by_frequency[grid[p]].append(p)
    return by_frequency


def _resonant_line(grid: Grid[str], a: Vec2, b: Vec2) -> set[Vec2]:
    delta = b - a
    points: set[Vec2] = set()
    p = b
    while grid.inside(p):
        points.add(p)
        p = p + delta
    p = a
    while grid.inside(p):
        points.add(p)
        p = p - delta
    return points


def find_antinodes(grid: Grid[str], resonant: bool = False) -> set[Vec2]:
    """All antinode positions inside the map.

    With ``resonant`` set, every grid point in line with a pair of antennas
    at whole multiples of their spacing counts, the antennas included.
    """
    antinodes: set[Vec2] = set()
    for positions in _antennas(grid).values():
        for a, b in combinations(positions, 2):
            if resonant:
                antinodes |= _resonant_line(grid, a, b)
            else:
                antinodes.update(p for p in antinode_pair(a, b) if grid.inside(p))
    return antinodes


def part_a(text: str) -> int:
    return len(find_antinodes(parse(text)))


def part_b(text: str) -> int:
    return len(find_antinodes(parse(text), resonant=True))