"""Disk map compaction and filesystem checksums."""

import sys
from dataclasses import dataclass, replace
from pathlib import Path


@dataclass
class DiskEntry:
    """A run of blocks: a file with an id, or free space."""

    id: int
    size: int
    is_file: bool
    offset: int = 0


def parse(text):
    """Read the dense disk map, alternating file and free-space lengths."""
    entries = []
    next_id = 0
    is_file = True
    for line in text.split("\n"):
        if not line:
            continue
        for char in line:
            if char not in "0123456789":
                raise ValueError(f"unexpected character {char!r}")
            size = int(char)
            if is_file:
                entries.append(DiskEntry(next_id, size, True))
                next_id += 1
            else:
                entries.append(DiskEntry(0, size, False))
            is_file = not is_file
    return entries


def _checksum(blocks):
    return sum(position * file_id for position, file_id in enumerate(blocks))


def compact_blocks(entries):
    """Move single blocks from the end into the leftmost free space; return the checksum."""
    disk = [replace(entry) for entry in entries]
    first = 0
    last = len(disk) - 1
    blocks = []
    while first <= last:
        head = disk[first]
        if head.is_file or head.size == 0:
            blocks.extend([head.id] * head.size)
            first += 1
            continue
        tail = disk[last]
        if not tail.is_file or tail.size == 0:
            last -= 1
            continue
        moved = min(head.size, tail.size)
        blocks.extend([tail.id] * moved)
        if head.size == moved:
            first += 1
            tail.size -= moved
        else:
            last -= 1
            head.size -= moved
    return _checksum(blocks)


def compact_files(entries):
    """Move whole files, highest id first, into the leftmost gap that fits; return the checksum."""
    disk = [replace(entry) for entry in entries]
    offset = 0
    for entry in disk:
        entry.offset = offset
        offset += entry.size
    blocks = [0] * offset

    for last in range(len(disk) - 1, -1, -1):
        moving = disk[last]
        if moving.size == 0 or not moving.is_file:
            continue
        for gap in disk[:last]:
            if gap.is_file or gap.size == 0 or gap.size < moving.size:
                continue
            blocks[gap.offset:gap.offset + moving.size] = [moving.id] * moving.size
            gap.size -= moving.size
            gap.offset += moving.size
            moving.size = 0
            break

    for entry in disk:
        if entry.is_file and entry.size > 0:
            blocks[entry.offset:entry.offset + entry.size] = [entry.id] * entry.size
    return _checksum(blocks)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "Input.txt"
    entries = parse(Path(path).read_text())
    print(f"Part 1: {compact_blocks(entries)}")
    print(f"Part 2: {compact_files(entries)}")


if __name__ == "__main__":
    main()