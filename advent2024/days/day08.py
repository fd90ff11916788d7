"""Day 8: Resonant Collinearity."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import combinations

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(8)

Point = tuple[int, int]


@dataclass
class Field:
    """Map size (width, height) and antenna positions by frequency."""

    size: Point = (0, 0)
    antennas: dict[str, list[Point]] = field(default_factory=dict)


def parse(input_text: str) -> Field:
    result = Field()
    width, height = 0, 0
    for y, line in enumerate(input_text.splitlines()):
        if not line:
            break
        height += 1
        width = len(line)
        for x, char in enumerate(line):
            if char != ".":
                result.antennas.setdefault(char, []).append((x, y))
    result.size = (width, height)
    return result


def find_antinodes(a1: Point, a2: Point, limits: Point, limit_to_1: bool) -> list[Point]:
    """Points on the line of two antennas, stepping away from each in turn.

    Points may fall outside the map; callers filter them.
    """
    x1, y1 = a1
    x2, y2 = a2
    dx = abs(x2 - x1)
    # Only the horizontal distance bounds the number of steps; a vertical pair
    # is bounded by the larger side of the map instead.
    count = limits[0] // dx if dx else max(limits) + 1
    steps = range(1, 2) if limit_to_1 else range(count)
    points: list[Point] = []
    for i in steps:
        points.append((x1 + i * (x1 - x2), y1 + i * (y1 - y2)))
        points.append((x2 + i * (x2 - x1), y2 + i * (y2 - y1)))
    return points


def _compute(input_text: str, only_first: bool) -> int:
    board = parse(input_text)
    width, height = board.size
    antinodes = {
        (x, y)
        for locations in board.antennas.values()
        for a1, a2 in combinations(locations, 2)
        for x, y in find_antinodes(a1, a2, board.size, only_first)
        if 0 <= x < width and 0 <= y < height
    }
    return len(antinodes)


def part_one(input_text: str) -> int:
    return _compute(input_text, True)


def part_two(input_text: str) -> int:
    return _compute(input_text, False)


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()