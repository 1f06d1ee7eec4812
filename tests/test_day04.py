import pytest

from aocsolve.day04 import count_x_mas, count_xmas, parse, part_a, part_b

EXAMPLE = (
    "MMMSXXMASM\n"
    "MSAMXMSMSA\n"
    "AMXSXMAAMM\n"
    "MSAMASMSMX\n"
    "XMASAMXAMM\n"
    "XXAMMXXAMA\n"
    "SMSMSASXSS\n"
    "SAXAMASAAA\n"
    "MAMMMXMMMM\n"
    "MXMXAXMASX\n"
)


def _transpose(rows):
    return ["".join(col) for col in zip(*rows)]


def _mirror(rows):
    return [row[::-1] for row in rows]


def test_parse_rows():
    assert parse("AB\nCD\n") == ["AB", "CD"]
    with pytest.raises(ValueError):
        parse("AB\nC\n")


def test_example_answers():
    assert part_a(EXAMPLE) == 18
    assert part_b(EXAMPLE) == 9


def test_single_cross():
    assert count_x_mas(["M.S", ".A.", "M.S"]) == 1


def test_counts_invariant_under_symmetry():
    rows = parse(EXAMPLE)
    assert count_xmas(_transpose(rows)) == count_xmas(rows)
    assert count_xmas(_mirror(rows)) == count_xmas(rows)
    assert count_x_mas(_transpose(rows)) == count_x_mas(rows)
    assert count_x_mas(_mirror(rows)) == count_x_mas(rows)


def test_word_in_every_orientation_counts_same():
    horizontal = count_xmas(["XMAS"])
    assert count_xmas(["SAMX"]) == horizontal
    assert count_xmas(list("XMAS")) == horizontal
    assert count_xmas(["XMSA"]) == 0
    assert count_xmas([]) == 0