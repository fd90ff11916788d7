"""Day 11: Plutonian Pebbles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from functools import lru_cache

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(11)

_FACTOR = 2024


def parse(input_text: str) -> list[int]:
    return [int(token) for token in input_text.split()]


def _blink(stone: int) -> list[int]:
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [stone * _FACTOR]


def step(stones: Sequence[int]) -> list[int]:
    """Apply one blink to every stone, keeping their order."""
    return [new for stone in stones for new in _blink(stone)]


def step_counts(counts: Mapping[int, int]) -> Counter[int]:
    """Apply one blink to a multiset of stones given as value counts."""
    result: Counter[int] = Counter()
    for stone, count in counts.items():
        for new in _blink(stone):
            result[new] += count
    return result


@lru_cache(maxsize=None)
def count_stones(value: int, steps: int) -> int:
    """Number of stones a single stone becomes after ``steps`` blinks."""
    if steps == 0:
        return 1
    return sum(count_stones(new, steps - 1) for new in _blink(value))


def part_one(input_text: str) -> int:
    stones = parse(input_text)
    for _ in range(25):
        stones = step(stones)
    return len(stones)


def part_two(input_text: str) -> int:
    counts: Counter[int] = Counter(parse(input_text))
    for _ in range(75):
        counts = step_counts(counts)
    return sum(counts.values())


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()