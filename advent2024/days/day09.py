"""Day 9: Disk Fragmenter."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(9)


@dataclass(frozen=True)
class _Slot:
    begin: int
    length: int


def _digits(input_text: str) -> list[int]:
    text = input_text.strip()
    if not text.isdigit():
        raise ValueError("disk map must consist of digits")
    return [int(char) for char in text]


def parse(input_text: str) -> list[int | None]:
    """Expand the disk map into blocks holding a file id or None for free space."""
    disk: list[int | None] = []
    for idx, count in enumerate(_digits(input_text)):
        disk.extend([idx // 2 if idx % 2 == 0 else None] * count)
    return disk


def check_sum(disk: Sequence[int | None]) -> int:
    return sum(position * (value or 0) for position, value in enumerate(disk))


def part_one(input_text: str) -> int:
    """Move blocks one at a time from the end into the leftmost free space."""
    disk = parse(input_text)
    from_back = [(idx, value) for idx, value in reversed(list(enumerate(disk))) if value is not None]
    taken = 0
    done = False
    for position, value in enumerate(disk):
        if value is not None:
            next_idx = from_back[taken][0]
            if done or position > next_idx:
                done = True
                disk[position] = None
        elif not done:
            disk[position] = from_back[taken][1]
            taken += 1
    return check_sum(disk)


def _parse_as_blocks(input_text: str) -> tuple[dict[int, _Slot], list[_Slot]]:
    files: dict[int, _Slot] = {}
    free: list[_Slot] = []
    current = 0
    for idx, count in enumerate(_digits(input_text)):
        if idx % 2 == 0:
            files[idx // 2] = _Slot(current, count)
        else:
            free.append(_Slot(current, count))
        current += count
    return files, free


def part_two(input_text: str) -> int:
    """Move whole files, highest id first, into the leftmost span that fits."""
    files, free = _parse_as_blocks(input_text)
    for file_id in sorted(files, reverse=True):
        slot = files[file_id]
        found = next(
            ((idx, span) for idx, span in enumerate(free) if span.length >= slot.length),
            None,
        )
        if found is None or found[1].begin >= slot.begin:
            continue
        idx, span = found
        files[file_id] = _Slot(span.begin, slot.length)
        del free[idx]
        if span.length > slot.length:
            free.insert(idx, _Slot(span.begin + slot.length, span.length - slot.length))
    return sum(
        file_id * slot.length * (2 * slot.begin + slot.length - 1) // 2
        for file_id, slot in files.items()
    )


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()