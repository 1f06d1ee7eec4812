"""Day 11: stones that change every time you blink."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping

MULTIPLIER = 2024


def parse(text: str) -> list[int]:
    """The engraved numbers, in order."""
    try:
        return [int(token) for token in text.split()]
    except ValueError:
        raise ValueError("failed to read int") from None


def ndigits(x: int) -> int:
    """Number of decimal digits of ``x``; zero has one digit."""
    return len(str(abs(x)))


def _split(x: int, half: int) -> tuple[int, int]:
    sign = -1 if x < 0 else 1
    upper, lower = divmod(abs(x), 10**half)
    return sign * upper, sign * lower


def blink(stones: Mapping[int, int]) -> Counter[int]:
    """Apply one blink to stones given as number -> how many of them."""
    result: Counter[int] = Counter()
    for stone, count in stones.items():
        if stone == 0:
            result[1] += count
            continue
        digits = ndigits(stone)
        if digits % 2 == 0:
            upper, lower = _split(stone, digits // 2)
            result[upper] += count
            result[lower] += count
        else:
            result[stone * MULTIPLIER] += count
    return result


def count_after(stones: Iterable[int], n: int) -> int:
    """Number of stones after blinking ``n`` times."""
    counts: Counter[int] = Counter(stones)
    for _ in range(n):
        counts = blink(counts)
    return sum(counts.values())


def part_a(text: str) -> int:
    return count_after(parse(text), 25)


def part_b(text: str) -> int:
    return count_after(parse(text), 75)