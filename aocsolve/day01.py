"""Day 1: distance and similarity between two lists of location ids."""

from __future__ import annotations

from collections import Counter


def parse(text: str) -> tuple[list[int], list[int]]:
    """Split the two whitespace-separated columns into two lists."""
    numbers = [int(token) for token in text.split()]
    if len(numbers) % 2:
        raise ValueError("input does not hold pairs of numbers")
    return numbers[0::2], numbers[1::2]


def total_distance(left: list[int], right: list[int]) -> int:
    """Sum of distances between the lists after sorting both."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: list[int], right: list[int]) -> int:
    """Sum of each left value times how often it occurs on the right."""
    counts = Counter(right)
    return sum(x * counts[x] for x in left)


def part_a(text: str) -> int:
    return total_distance(*parse(text))


def part_b(text: str) -> int:
    return similarity_score(*parse(text))