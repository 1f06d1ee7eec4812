"""Day 4: word search for XMAS and for crossed MAS patterns."""

from __future__ import annotations

_DIRECTIONS = [
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
]


def parse(text: str) -> list[str]:
    """The rows of the letter grid, which must all have the same width."""
    rows = text.splitlines()
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("rows of the word search differ in width")
    return rows


def _char_at(rows: list[str], x: int, y: int) -> str:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return ""


def _matches(rows: list[str], x: int, y: int, dx: int, dy: int, word: str) -> bool:
    return all(
        _char_at(rows, x + i * dx, y + i * dy) == c for i, c in enumerate(word)
    )


def count_xmas(rows: list[str]) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    return sum(
        _matches(rows, x, y, dx, dy, "XMAS")
        for y, row in enumerate(rows)
        for x, c in enumerate(row)
        if c == "X"
        for dx, dy in _DIRECTIONS
    )


def _is_x_mas(rows: list[str], x: int, y: int) -> bool:
    rising = any(_matches(rows, x - 1, y + 1, 1, -1, w) for w in ("SAM", "MAS"))
    falling = any(_matches(rows, x - 1, y - 1, 1, 1, w) for w in ("SAM", "MAS"))
    return rising and falling


def count_x_mas(rows: list[str]) -> int:
    """Centres of two MAS words crossing diagonally."""
    return sum(
        _is_x_mas(rows, x, y)
        for y, row in enumerate(rows)
        for x, c in enumerate(row)
        if c == "A"
    )


def part_a(text: str) -> int:
    return count_xmas(parse(text))


def part_b(text: str) -> int:
    return count_x_mas(parse(text))