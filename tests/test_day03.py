from aocsolve.day03 import parse, part_a, part_b

EXAMPLE_A = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_B = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_parse_single_instruction():
    assert parse("mul(2,4)") == [(2, 4)]


def test_parse_rejects_malformed():
    assert parse("mul(2,4]") == []
    assert parse("mul(2 4)") == []
    assert parse("mul(,4)") == []


def test_parse_example_pairs():
    assert parse(EXAMPLE_A) == [(2, 4), (5, 5), (11, 8), (8, 5)]


def test_conditionals_toggle():
    text = "don't()mul(2,3)do()mul(4,5)"
    assert parse(text, conditionals=True) == [(4, 5)]
    assert parse(text) == [(2, 3), (4, 5)]


def test_example_answers():
    assert part_a(EXAMPLE_A) == 161
    assert part_b(EXAMPLE_B) == 48


def test_conditionals_never_add():
    assert part_b(EXAMPLE_A) == part_a(EXAMPLE_A)
    assert set(parse(EXAMPLE_B, conditionals=True)) <= set(parse(EXAMPLE_B))