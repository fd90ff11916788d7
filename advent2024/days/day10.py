"""Day 10: Hoof It."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(10)

Point = tuple[int, int]
Grid = Sequence[Sequence[int]]

_SUMMIT = 9


def parse(input_text: str) -> list[list[int]]:
    """Read the topographic map as rows of heights."""
    return [[int(char) for char in line] for line in input_text.splitlines()]


def _neighbors(x: int, y: int, size: Point) -> Iterator[Point]:
    width, height = size
    if x > 0:
        yield x - 1, y
    if y > 0:
        yield x, y - 1
    if x < width - 1:
        yield x + 1, y
    if y < height - 1:
        yield x, y + 1


def valid_paths(grid: Grid, x: int, y: int, h: int, size: Point) -> int:
    """Number of distinct uphill trails from ``(x, y)`` at height ``h`` to a summit."""
    if grid[y][x] != h:
        return 0
    if h == _SUMMIT:
        return 1
    return sum(valid_paths(grid, nx, ny, h + 1, size) for nx, ny in _neighbors(x, y, size))


def reachable_nines(grid: Grid, x: int, y: int, h: int, size: Point) -> set[Point]:
    """Summits reachable by an uphill trail from ``(x, y)`` at height ``h``."""
    if grid[y][x] != h:
        return set()
    if h == _SUMMIT:
        return {(x, y)}
    reached: set[Point] = set()
    for nx, ny in _neighbors(x, y, size):
        reached |= reachable_nines(grid, nx, ny, h + 1, size)
    return reached


def _starts(grid: Grid) -> tuple[Point, Iterator[Point]]:
    size = (len(grid[0]), len(grid))
    width, height = size
    return size, ((x, y) for x in range(height) for y in range(width))


def part_one(input_text: str) -> int:
    grid = parse(input_text)
    size, starts = _starts(grid)
    return sum(len(reachable_nines(grid, x, y, 0, size)) for x, y in starts)


def part_two(input_text: str) -> int:
    grid = parse(input_text)
    size, starts = _starts(grid)
    return sum(valid_paths(grid, x, y, 0, size) for x, y in starts)


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()