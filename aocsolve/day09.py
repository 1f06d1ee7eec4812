"""Day 9: compacting files on a disk described by a dense map."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = "0123456789"


@dataclass
class Block:
    """A run of ``size`` cells belonging to file ``idx``; ``idx < 0`` is free space."""

    idx: int
    size: int

    @property
    def empty(self) -> bool:
        return self.idx < 0


def parse(text: str, skip_empty: bool = False) -> list[Block]:
    """Read the disk map: alternating file and free-space sizes.

    With ``skip_empty`` set, zero-sized runs are left out and do not take up
    a file id.
    """
    line = text.split("\n", 1)[0]
    blocks: list[Block] = []
    next_id = 0
    for i, ch in enumerate(line):
        if ch not in _DIGITS:
            raise ValueError(f"invalid disk map character {ch!r}")
        size = int(ch)
        if skip_empty and size == 0:
            continue
        if i % 2:
            blocks.append(Block(-1, size))
        else:
            blocks.append(Block(next_id, size))
            next_id += 1
    return blocks


def compact_blocks(blocks: list[Block]) -> list[Block]:
    """Move file cells one by one from the end into the leftmost free space.

    Files may be split. Trailing free space is dropped from the result.
    """
    work = [Block(b.idx, b.size) for b in blocks]
    result: list[Block] = []
    left, right = 0, len(work) - 1
    while left <= right:
        block = work[left]
        left += 1
        if not block.empty:
            result.append(block)
            continue
        free = block.size
        while free > 0 and left <= right:
            source = work[right]
            if source.empty or source.size == 0:
                right -= 1
                continue
            moved = min(free, source.size)
            result.append(Block(source.idx, moved))
            source.size -= moved
            free -= moved
            if source.size == 0:
                right -= 1
    return result


def compact_files(blocks: list[Block]) -> list[Block]:
    """Move whole files, last first, into the leftmost free run that fits."""
    disk = [Block(b.idx, b.size) for b in blocks]
    i = len(disk) - 1
    while i > 0:
        block = disk[i]
        if not block.empty:
            target = next(
                (
                    j
                    for j, slot in enumerate(disk[:i])
                    if slot.empty and slot.size >= block.size
                ),
                None,
            )
            if target is not None:
                slot = disk[target]
                moved = [Block(block.idx, block.size)]
                if slot.size > block.size:
                    moved.append(Block(-1, slot.size - block.size))
                    i += 1
                disk[target:target + 1] = moved
                disk[i] = Block(-1, block.size)
        i -= 1
    return disk


def checksum(blocks: list[Block]) -> int:
    """Sum of position times file id over every file cell."""
    total = 0
    position = 0
    for block in blocks:
        if not block.empty:
            total += block.idx * sum(range(position, position + block.size))
        position += block.size
    return total


def part_a(text: str) -> int:
    return checksum(compact_blocks(parse(text)))


def part_b(text: str) -> int:
    return checksum(compact_files(parse(text, skip_empty=True)))