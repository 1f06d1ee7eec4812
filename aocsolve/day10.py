"""Day 10: hiking trails climbing from height 0 to height 9."""

from __future__ import annotations

from aocsolve.grid import DIRECTIONS, Grid, Vec2

PEAK = 9
TRAILHEAD = 0


def parse(text: str) -> Grid[int]:
    """The topographic map as a grid of heights."""
    rows = text.splitlines()
    cells = [ord(c) - ord("0") for row in rows for c in row]
    width = max((len(row) for row in rows), default=0)
    return Grid(cells, width)


def _uphill(grid: Grid[int], p: Vec2) -> list[Vec2]:
    height = grid[p]
    return [
        q for q in (p + d for d in DIRECTIONS) if grid.at_or(q, None) == height + 1
    ]


def trailhead_score(grid: Grid[int]) -> int:
    """Sum over trailheads of the number of distinct peaks each reaches."""
    cache: dict[Vec2, frozenset[Vec2]] = {}

    def peaks(p: Vec2) -> frozenset[Vec2]:
        if p not in cache:
            if grid[p] == PEAK:
                cache[p] = frozenset({p})
            else:
                cache[p] = frozenset().union(*(peaks(q) for q in _uphill(grid, p)))
        return cache[p]

    return sum(len(peaks(p)) for p in grid.positions() if grid[p] == TRAILHEAD)


def trailhead_rating(grid: Grid[int]) -> int:
    """Sum over trailheads of the number of distinct trails to any peak."""
    cache: dict[Vec2, int] = {}

    def paths(p: Vec2) -> int:
        if p not in cache:
            if grid[p] == PEAK:
                cache[p] = 1
            else:
                cache[p] = sum(paths(q) for q in _uphill(grid, p))
        return cache[p]

    return sum(paths(p) for p in grid.positions() if grid[p] == TRAILHEAD)


def part_a(text: str) -> int:
    return trailhead_score(parse(text))


def part_b(text: str) -> int:
    return trailhead_rating(parse(text))