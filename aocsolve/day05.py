"""Day 5: page ordering rules for safety manual updates."""

from __future__ import annotations

from dataclasses import dataclass, field

from aocsolve.parse import Scanner

MAX_PAGE = 100


def _check_page(page: int) -> None:
    if not 0 <= page < MAX_PAGE:
        raise IndexError(f"page number {page} outside 0..{MAX_PAGE - 1}")


@dataclass
class RuleSet:
    """Ordering rules of the form "x must appear before y"."""

    _before: set[tuple[int, int]] = field(default_factory=set)

    def add_rule(self, x: int, y: int) -> None:
        """Record that page ``x`` must appear before page ``y``."""
        _check_page(x)
        _check_page(y)
        self._before.add((x, y))

    def required_before(self, x: int, y: int) -> bool:
        """True when page ``x`` must appear before page ``y``."""
        _check_page(x)
        _check_page(y)
        return (x, y) in self._before

    def __len__(self) -> int:
        return len(self._before)


def parse(text: str) -> tuple[RuleSet, list[list[int]]]:
    """Read the rules, a blank line, then one comma-separated manual per line."""
    scanner = Scanner(text)
    rules = RuleSet()

    while not scanner.try_consume_newline():
        x = scanner.consume_int()
        scanner.consume("|")
        y = scanner.consume_int()
        scanner.consume("\n")
        rules.add_rule(x, y)

    manuals: list[list[int]] = []
    while not scanner.at_end():
        manual: list[int] = []
        while not scanner.try_consume_newline():
            manual.append(scanner.consume_int())
            scanner.try_consume(",")
        manuals.append(manual)

    return rules, manuals


def manual_valid(rules: RuleSet, manual: list[int]) -> bool:
    """True when no page comes after a page it must precede."""
    return not any(
        rules.required_before(later, earlier)
        for i, later in enumerate(manual)
        for earlier in manual[:i]
    )


def repair_manual(rules: RuleSet, manual: list[int]) -> list[int]:
    """Swap out-of-order pages until the manual becomes valid.

    Returns a new list; the argument is left unchanged.
    """
    pages = list(manual)
    for i in range(len(pages)):
        for j in range(i):
            if rules.required_before(pages[i], pages[j]):
                pages[i], pages[j] = pages[j], pages[i]
                if manual_valid(rules, pages):
                    return pages
    return pages


def middle_entry(manual: list[int]) -> int:
    """The page in the middle of the manual."""
    if not manual:
        raise IndexError("empty manual has no middle entry")
    return manual[len(manual) // 2]


def part_a(text: str) -> int:
    rules, manuals = parse(text)
    return sum(middle_entry(m) for m in manuals if manual_valid(rules, m))


def part_b(text: str) -> int:
    rules, manuals = parse(text)
    return sum(
        middle_entry(repair_manual(rules, m))
        for m in manuals
        if not manual_valid(rules, m)
    )