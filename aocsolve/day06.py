"""Day 6: a patrolling guard and obstacles that trap it in a loop."""

from __future__ import annotations

from enum import Enum

from aocsolve.grid import UP, Grid, Vec2
from aocsolve.parse import ParseError, Scanner


class Cell(Enum):
    EMPTY = "."
    VISITED = "X"
    OBSTACLE = "#"


def parse(text: str) -> tuple[Grid[Cell], Vec2]:
    """The map as a grid of cells and the guard's starting position."""
    scanner = Scanner(text)
    cells: list[Cell] = []
    width = 0
    start = Vec2()
    y = 0

    while not scanner.at_end():
        x = 0
        while not scanner.try_consume_newline():
            if scanner.at_end():
                raise ParseError("map row is not terminated by a newline")
            ch = scanner.advance()
            if ch == ".":
                cells.append(Cell.EMPTY)
            elif ch == "#":
                cells.append(Cell.OBSTACLE)
            elif ch == "^":
                start = Vec2(x, y)
                cells.append(Cell.EMPTY)
            else:
                raise ParseError(f"unexpected map character {ch!r}")
            x += 1
        y += 1
        width = max(width, x)

    return Grid(cells, width), start


def count_visited(grid: Grid[Cell], start: Vec2) -> int:
    """Distinct cells the guard walks over before leaving the map."""
    g = grid.copy()
    pos, direction = start, UP
    visited = 0
    while g.inside(pos):
        if g[pos] is Cell.EMPTY:
            visited += 1
            g[pos] = Cell.VISITED
        step = pos + direction
        if g.at_or(step, Cell.EMPTY) is Cell.OBSTACLE:
            direction = direction.rotate90deg()
            step = pos + direction
        pos = step
    return visited


def loops(grid: Grid[Cell], start: Vec2, direction: Vec2) -> bool:
    """True when the guard never leaves the map."""
    seen: set[tuple[Vec2, Vec2]] = set()
    pos = start
    while grid.inside(pos):
        state = (pos, direction)
        if state in seen:
            return True
        if grid[pos] is not Cell.OBSTACLE:
            seen.add(state)
        step = pos + direction
        if grid.at_or(step, Cell.EMPTY) is Cell.OBSTACLE:
            direction = direction.rotate90deg()
        else:
            pos = step
    return False


def count_loop_obstacles(grid: Grid[Cell], start: Vec2) -> int:
    """Empty cells where one added obstacle traps the guard in a loop."""
    work = grid.copy()
    total = 0
    for p in work.positions():
        if p == start or work[p] is not Cell.EMPTY:
            continue
        work[p] = Cell.OBSTACLE
        total += loops(work, start, UP)
        work[p] = Cell.EMPTY
    return total


def part_a(text: str) -> int:
    return count_visited(*parse(text))


def part_b(text: str) -> int:
    return count_loop_obstacles(*parse(text))