"""Day 3: summing products of ``mul(x,y)`` instructions in corrupted memory."""

from __future__ import annotations

from aocsolve.parse import Scanner


def parse(text: str, conditionals: bool = False) -> list[tuple[int, int]]:
    """Extract the operand pairs of well-formed ``mul(x,y)`` instructions.

    With ``conditionals`` set, ``do()`` and ``don't()`` toggle whether
    following instructions count.
    """
    scanner = Scanner(text)
    pairs: list[tuple[int, int]] = []
    enabled = True

    while not scanner.at_end():
        if conditionals:
            if scanner.try_consume("do()"):
                enabled = True
                continue
            if scanner.try_consume("don't()"):
                enabled = False
                continue

        if not scanner.try_consume("mul("):
            scanner.advance()
            continue
        x = scanner.try_consume_int()
        if x is None or not scanner.try_consume(","):
            continue
        y = scanner.try_consume_int()
        if y is None or not scanner.try_consume(")"):
            continue
        if enabled:
            pairs.append((x, y))

    return pairs


def part_a(text: str) -> int:
    return sum(x * y for x, y in parse(text))


def part_b(text: str) -> int:
    return sum(x * y for x, y in parse(text, conditionals=True))