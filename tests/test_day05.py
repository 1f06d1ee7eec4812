import pytest

from aocsolve.day05 import (
    RuleSet,
    manual_valid,
    middle_entry,
    parse,
    part_a,
    part_b,
    repair_manual,
)
from aocsolve.parse import ParseError

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


def test_ruleset_direction():
    rules = RuleSet()
    rules.add_rule(47, 53)
    assert rules.required_before(47, 53) is True
    assert rules.required_before(53, 47) is False


def test_ruleset_rejects_out_of_range_pages():
    rules = RuleSet()
    with pytest.raises(IndexError):
        rules.add_rule(100, 1)
    with pytest.raises(IndexError):
        rules.required_before(1, 100)


def test_parse_example():
    rules, manuals = parse(EXAMPLE)
    assert len(rules) == 21
    assert rules.required_before(97, 75)
    assert len(manuals) == 6
    assert manuals[0] == [75, 47, 61, 53, 29]
    assert manuals[-1] == [97, 13, 75, 29, 47]


def test_parse_requires_blank_separator():
    with pytest.raises(ParseError):
        parse("1|2\n")


def test_manual_valid():
    rules, manuals = parse(EXAMPLE)
    assert [manual_valid(rules, m) for m in manuals] == [
        True, True, True, False, False, False,
    ]


def test_middle_entry():
    assert middle_entry([75, 47, 61, 53, 29]) == 61
    with pytest.raises(IndexError):
        middle_entry([])


def test_repair_manual_produces_valid_permutation():
    rules, manuals = parse(EXAMPLE)
    for manual in manuals:
        if manual_valid(rules, manual):
            continue
        original = list(manual)
        repaired = repair_manual(rules, manual)
        assert manual == original
        assert sorted(repaired) == sorted(original)
        assert manual_valid(rules, repaired)


def test_repair_single_swap():
    rules, _ = parse(EXAMPLE)
    assert repair_manual(rules, [75, 97, 47, 61, 53]) == [97, 75, 47, 61, 53]


def test_example_parts():
    assert part_a(EXAMPLE) == 143
    assert part_b(EXAMPLE) == 123