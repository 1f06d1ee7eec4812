from collections import Counter

import pytest

from aocsolve.day09 import (
    Block,
    checksum,
    compact_blocks,
    compact_files,
    parse,
    part_a,
    part_b,
)

EXAMPLE = "2333133121414131402\n"


def _file_sizes(blocks):
    sizes = Counter()
    for b in blocks:
        if not b.empty:
            sizes[b.idx] += b.size
    return sizes


def _render(blocks):
    return "".join(("." if b.empty else str(b.idx)) * b.size for b in blocks)


def test_example_part_a():
    assert part_a(EXAMPLE) == 1928


def test_example_part_b():
    assert part_b(EXAMPLE) == 2858


def test_small_example_layout():
    assert _render(compact_blocks(parse("12345\n"))) == "022111222"


def test_parse_alternates_files_and_space():
    blocks = parse("12345\n")
    assert [b.size for b in blocks] == [1, 2, 3, 4, 5]
    assert [b.empty for b in blocks] == [False, True, False, True, False]
    assert [b.idx for b in blocks if not b.empty] == [0, 1, 2]


def test_parse_skip_empty_drops_zero_sizes():
    full = parse(EXAMPLE)
    skipped = parse(EXAMPLE, skip_empty=True)
    assert all(b.size > 0 for b in skipped)
    assert len(skipped) < len(full)
    assert _file_sizes(skipped) == _file_sizes(full)


def test_parse_rejects_non_digits():
    with pytest.raises(ValueError):
        parse("12a4\n")


def test_block_empty_flag():
    assert Block(-1, 3).empty
    assert not Block(0, 3).empty


def test_compact_blocks_preserves_files_and_leaves_no_gaps():
    blocks = parse(EXAMPLE)
    result = compact_blocks(blocks)
    assert _file_sizes(result) == _file_sizes(blocks)
    assert not any(b.empty and b.size > 0 for b in result)


def test_compact_blocks_leaves_input_unchanged():
    blocks = parse(EXAMPLE)
    before = [Block(b.idx, b.size) for b in blocks]
    compact_blocks(blocks)
    assert blocks == before


def test_compact_files_keeps_files_whole_and_length():
    blocks = parse(EXAMPLE, skip_empty=True)
    result = compact_files(blocks)
    assert _file_sizes(result) == _file_sizes(blocks)
    assert sum(b.size for b in result) == sum(b.size for b in blocks)
    file_runs = Counter(b.idx for b in result if not b.empty and b.size > 0)
    assert all(count == 1 for count in file_runs.values())


def test_compaction_never_raises_checksum_order():
    blocks = parse(EXAMPLE, skip_empty=True)
    assert checksum(compact_files(blocks)) <= checksum(blocks)


def test_checksum_ignores_free_space_contents():
    with_gap = [Block(0, 1), Block(-1, 2), Block(1, 1)]
    shifted = [Block(0, 1), Block(-1, 1), Block(-1, 1), Block(1, 1)]
    assert checksum(with_gap) == checksum(shifted)