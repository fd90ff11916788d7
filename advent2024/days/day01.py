"""Day 1: Historian Hysteria."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(1)


def parse_file(input_text: str) -> tuple[list[int], list[int]]:
    """Split the input into the left and right columns, stopping at a blank line."""
    left: list[int] = []
    right: list[int] = []
    for line in input_text.splitlines():
        if not line.strip():
            break
        first, second = line.split()[:2]
        left.append(int(first))
        right.append(int(second))
    return left, right


def part_one(input_text: str) -> int:
    left, right = parse_file(input_text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_two(input_text: str) -> int:
    left, right = parse_file(input_text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()