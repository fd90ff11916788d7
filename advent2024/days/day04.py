"""Day 4: Ceres Search."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(4)

_WORD = "XMAS"
_OUTSIDE = " "


def parse(input_text: str) -> list[list[str]]:
    return [list(line) for line in input_text.splitlines()]


def access(grid: Sequence[Sequence[str]], i: int, j: int) -> str:
    """The letter at row ``i``, column ``j``, or a blank outside the grid."""
    if 0 <= i < len(grid) and 0 <= j < len(grid[i]):
        return grid[i][j]
    return _OUTSIDE


def is_x_mas(grid: Sequence[Sequence[str]], x: int, y: int) -> bool:
    """True if two crossing ``MAS`` words are centred on ``(x, y)``."""
    if access(grid, x, y) != "A":
        return False
    diag_1 = sorted([access(grid, x - 1, y - 1), access(grid, x + 1, y + 1)])
    diag_2 = sorted([access(grid, x - 1, y + 1), access(grid, x + 1, y - 1)])
    return diag_1 == ["M", "S"] and diag_2 == ["M", "S"]


def matches_direction(
    grid: Sequence[Sequence[str]], x: int, y: int, incr_x: int, incr_y: int
) -> bool:
    """True if ``XMAS`` reads from ``(x, y)`` along the given step."""
    return all(
        access(grid, x + idx * incr_x, y + idx * incr_y) == letter
        for idx, letter in enumerate(_WORD)
    )


def part_one(input_text: str) -> int:
    grid = parse(input_text)
    rows, cols = len(grid), len(grid[0])
    steps = range(-1, 2)
    return sum(
        1
        for x, y, i, j in product(range(rows), range(cols), steps, steps)
        if matches_direction(grid, x, y, i, j)
    )


def part_two(input_text: str) -> int:
    grid = parse(input_text)
    rows, cols = len(grid), len(grid[0])
    return sum(1 for x, y in product(range(rows), range(cols)) if is_x_mas(grid, x, y))


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()