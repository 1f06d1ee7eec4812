"""Day 2: safety of reactor level reports."""

from __future__ import annotations


def parse(text: str) -> list[list[int]]:
    """One report per line, each a list of integers."""
    try:
        return [[int(token) for token in line.split()] for line in text.splitlines()]
    except ValueError:
        raise ValueError("could not parse integer") from None


def is_safe(level: list[int], skip: int | None = None) -> bool:
    """Strictly monotonic with steps of 1 to 3, ignoring index ``skip``."""
    values = [v for i, v in enumerate(level) if i != skip]
    pairs = list(zip(values, values[1:]))
    increasing = all(a < b for a, b in pairs)
    decreasing = all(a > b for a, b in pairs)
    if not all(1 <= abs(a - b) <= 3 for a, b in pairs):
        return False
    return increasing != decreasing


def is_safe_with_dampener(level: list[int]) -> bool:
    """Safe as is, or after removing any single entry."""
    return is_safe(level) or any(is_safe(level, i) for i in range(len(level)))


def part_a(text: str) -> int:
    return sum(is_safe(level) for level in parse(text))


def part_b(text: str) -> int:
    return sum(is_safe_with_dampener(level) for level in parse(text))