"""Day 7: calibration equations solved by inserting operators."""

from __future__ import annotations

from dataclasses import dataclass, field

from aocsolve.parse import Scanner

_INT64_MAX = 2**63 - 1


@dataclass
class Equation:
    result: int
    operands: list[int] = field(default_factory=list)


def parse(text: str) -> list[Equation]:
    """One ``result: a b c`` equation per line."""
    scanner = Scanner(text)
    equations: list[Equation] = []
    while not scanner.at_end():
        equation = Equation(scanner.consume_int())
        scanner.consume(":")
        while not scanner.try_consume_newline():
            equation.operands.append(scanner.consume_int())
        equations.append(equation)
    return equations


def concat(a: int, b: int) -> int:
    """Append the decimal digits of ``b`` to ``a``; a zero ``b`` adds nothing."""
    digits = len(str(b)) if b > 0 else 0
    return a * 10**digits + b


def _checked(value: int, operation: str) -> int:
    if not -_INT64_MAX - 1 <= value <= _INT64_MAX:
        raise OverflowError(f"overflow in {operation}")
    return value


def _solve(result: int, operands: list[int], fold: int, with_concat: bool) -> bool:
    if not operands:
        return result == fold
    if fold > result:
        return False

    head, tail = operands[0], operands[1:]
    if fold == 0:
        return _solve(result, tail, head, with_concat)

    if _solve(result, tail, _checked(fold + head, "add"), with_concat):
        return True
    if _solve(result, tail, _checked(fold * head, "mul"), with_concat):
        return True
    return with_concat and _solve(result, tail, concat(fold, head), with_concat)


def solvable(result: int, operands: list[int], with_concat: bool = False) -> bool:
    """True when ``+`` and ``*`` (and ``||`` if enabled), applied left to
    right, can combine the operands into ``result``."""
    return _solve(result, list(operands), 0, with_concat)


def part_a(text: str) -> int:
    return sum(e.result for e in parse(text) if solvable(e.result, e.operands))


def part_b(text: str) -> int:
    return sum(
        e.result for e in parse(text) if solvable(e.result, e.operands, True)
    )