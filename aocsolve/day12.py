"""Day 12: fence prices for garden regions."""

from __future__ import annotations

from collections import deque

from aocsolve.grid import DIRECTIONS, DOWN, LEFT, RIGHT, UP, Grid, Vec2


def parse(text: str) -> Grid[str]:
    """The garden map as a grid of plant letters."""
    rows = text.splitlines()
    cells = [c for row in rows for c in row]
    width = max((len(row) for row in rows), default=0)
    return Grid(cells, width)


def _regions(grid: Grid[str]) -> list[set[Vec2]]:
    seen: set[Vec2] = set()
    regions: list[set[Vec2]] = []
    for start in grid.positions():
        if start in seen:
            continue
        plant = grid[start]
        region = {start}
        queue = deque([start])
        seen.add(start)
        while queue:
            p = queue.popleft()
            for d in DIRECTIONS:
                q = p + d
                if q not in seen and grid.at_or(q, None) == plant:
                    seen.add(q)
                    region.add(q)
                    queue.append(q)
        regions.append(region)
    return regions


def _has_fence(grid: Grid[str], p: Vec2, d: Vec2) -> bool:
    return grid.at_or(p + d, None) != grid[p]


def _perimeter(grid: Grid[str], region: set[Vec2]) -> int:
    return sum(_has_fence(grid, p, d) for p in region for d in DIRECTIONS)


def _sides(grid: Grid[str], region: set[Vec2]) -> int:
    sides = 0
    for p in region:
        for d in DIRECTIONS:
            if not _has_fence(grid, p, d):
                continue
            previous = p + (LEFT if d in (UP, DOWN) else UP)
            if previous in region and _has_fence(grid, previous, d):
                continue
            sides += 1
    return sides


def fencing_price(grid: Grid[str]) -> int:
    """Sum over regions of area times perimeter."""
    return sum(len(r) * _perimeter(grid, r) for r in _regions(grid))


def discounted_price(grid: Grid[str]) -> int:
    """Sum over regions of area times number of straight sides."""
    return sum(len(r) * _sides(grid, r) for r in _regions(grid))


def part_a(text: str) -> int:
    return fencing_price(parse(text))


def part_b(text: str) -> int:
    return discounted_price(parse(text))


__all__ = [
    "parse",
    "fencing_price",
    "discounted_price",
    "part_a",
    "part_b",
    "RIGHT",
]