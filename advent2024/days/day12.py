"""Day 12: Garden Groups."""

from __future__ import annotations

from collections.abc import Sequence

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(12)

Point = tuple[int, int]


def parse(input_text: str) -> list[list[str]]:
    return [list(line) for line in input_text.splitlines()]


def _neighbors(point: Point) -> list[Point]:
    x, y = point
    return [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]


def _split_region(cells: list[Point]) -> list[list[Point]]:
    members = set(cells)
    visited: set[Point] = set()
    components: list[list[Point]] = []
    for cell in cells:
        if cell in visited:
            continue
        component: list[Point] = []
        stack = [cell]
        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            component.append(current)
            stack.extend(n for n in _neighbors(current) if n in members and n not in visited)
        components.append(component)
    return components


def split_into_regions(grid: Sequence[Sequence[str]]) -> list[list[Point]]:
    """Group the plots into connected regions of the same plant."""
    by_plant: dict[str, list[Point]] = {}
    for y, line in enumerate(grid):
        for x, plant in enumerate(line):
            by_plant.setdefault(plant, []).append((x, y))
    return [component for cells in by_plant.values() for component in _split_region(cells)]


def fence_price(region: Sequence[Point]) -> int:
    """Area times perimeter of a region."""
    members = set(region)
    perimeter = sum(
        4 - sum(1 for neighbor in _neighbors(cell) if neighbor in members) for cell in region
    )
    return perimeter * len(region)


def get_sides(borders: Sequence[Point], horizontal: bool) -> list[list[Point]]:
    """Split the cells into runs that touch along one axis.

    With ``horizontal`` the runs follow the y axis, otherwise the x axis.
    """
    offsets = ((0, -1), (0, 1)) if horizontal else ((-1, 0), (1, 0))
    members = set(borders)
    visited: set[Point] = set()
    sides: list[list[Point]] = []
    for border in borders:
        if border in visited:
            continue
        side: list[Point] = []
        stack = [border]
        visited.add(border)
        while stack:
            x, y = stack.pop()
            side.append((x, y))
            for dx, dy in offsets:
                neighbor = (x + dx, y + dy)
                if neighbor in members and neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)
        sides.append(side)
    return sides


def discount_price(region: Sequence[Point]) -> int:
    """Area times the number of runs along both axes."""
    sides = len(get_sides(region, True)) + len(get_sides(region, False))
    return sides * len(region)


def part_one(input_text: str) -> int:
    return sum(fence_price(region) for region in split_into_regions(parse(input_text)))


def part_two(input_text: str) -> int:
    return sum(discount_price(region) for region in split_into_regions(parse(input_text)))


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()