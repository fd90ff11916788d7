"""Day 2: Red-Nosed Reports."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(2)


def parse_line(line: str) -> list[int]:
    return [int(token) for token in line.split()]


def parse_file(input_text: str) -> list[list[int]]:
    return [parse_line(line) for line in input_text.splitlines()]


def is_safe(data: Sequence[int]) -> bool:
    """True if levels move steadily in one direction by 1 to 3 per step."""
    sign = 0
    for a, b in pairwise(data):
        delta = a - b
        if not 0 < abs(delta) <= 3 or sign * delta < 0:
            return False
        sign = delta
    return True


def is_safe_with_dampener(data: Sequence[int]) -> bool:
    """True if the report is safe once at most one level is removed."""
    items = list(data)
    return is_safe(items) or any(
        is_safe(items[:index] + items[index + 1 :]) for index in range(len(items))
    )


def part_one(input_text: str) -> int:
    return sum(1 for report in parse_file(input_text) if is_safe(report))


def part_two(input_text: str) -> int:
    return sum(1 for report in parse_file(input_text) if is_safe_with_dampener(report))


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()