"""Day 15: Warehouse Woes, on the widened warehouse."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(15)

Point = tuple[int, int]

_STEPS = {"^": (0, -1), ">": (1, 0), "<": (-1, 0), "v": (0, 1)}


class Tile(Enum):
    WALL = "#"
    EMPTY = "."
    CRATE_LEFT = "["
    CRATE_RIGHT = "]"


def move_pos(pos: Point, direction: str) -> Point:
    """The position one step from ``pos`` in ``direction`` (one of ``^ > < v``)."""
    try:
        dx, dy = _STEPS[direction]
    except KeyError:
        raise ValueError(f"not a valid direction: {direction!r}") from None
    return pos[0] + dx, pos[1] + dy


def _right(pos: Point) -> Point:
    return pos[0] + 1, pos[1]


def _left(pos: Point) -> Point:
    return pos[0] - 1, pos[1]


@dataclass
class Warehouse:
    """Tiles of the double-width warehouse, the robot and the original size."""

    tiles: dict[Point, Tile] = field(default_factory=dict)
    robot: Point = (0, 0)
    size: Point = (0, 0)

    def step(self, direction: str) -> None:
        """Move the robot one step, pushing crates when they can move."""
        new_pos = move_pos(self.robot, direction)
        tile = self.tiles[new_pos]
        if tile is Tile.EMPTY:
            self.robot = new_pos
        elif tile is Tile.CRATE_LEFT:
            if self._move_crate(direction, new_pos, True):
                self.robot = new_pos
        elif tile is Tile.CRATE_RIGHT:
            if self._move_crate(direction, _left(new_pos), True):
                self.robot = new_pos

    def _shift(self, current: Point, target: Point) -> None:
        self.tiles[current] = Tile.EMPTY
        self.tiles[_right(current)] = Tile.EMPTY
        self.tiles[target] = Tile.CRATE_LEFT
        self.tiles[_right(target)] = Tile.CRATE_RIGHT

    def _move_crate(self, direction: str, crate: Point, do_it: bool) -> bool:
        """Check, and with ``do_it`` perform, the move of the crate whose left half is ``crate``."""
        target = move_pos(crate, direction)
        c1 = self.tiles[target]
        c2 = self.tiles[_right(target)]

        if direction == "<":
            if c1 is Tile.WALL:
                return False
            if c1 is Tile.EMPTY:
                movable = True
            elif c1 is Tile.CRATE_RIGHT:
                movable = self._move_crate(direction, _left(target), do_it)
            else:
                raise ValueError("crate halves out of order")
        elif direction == ">":
            if c2 is Tile.WALL:
                return False
            if c2 is Tile.EMPTY:
                movable = True
            elif c2 is Tile.CRATE_LEFT:
                movable = self._move_crate(direction, _right(target), do_it)
            else:
                raise ValueError("crate halves out of order")
        else:
            if Tile.WALL in (c1, c2):
                return False
            pair = (c1, c2)
            if pair == (Tile.EMPTY, Tile.EMPTY):
                movable = True
            elif pair == (Tile.CRATE_LEFT, Tile.CRATE_RIGHT):
                movable = self._move_crate(direction, target, do_it)
            elif pair == (Tile.EMPTY, Tile.CRATE_LEFT):
                movable = self._move_crate(direction, _right(target), do_it)
            elif pair == (Tile.CRATE_RIGHT, Tile.EMPTY):
                movable = self._move_crate(direction, _left(target), do_it)
            elif pair == (Tile.CRATE_RIGHT, Tile.CRATE_LEFT):
                movable = self._move_crate(
                    direction, _left(target), False
                ) and self._move_crate(direction, _right(target), False)
                if movable and do_it:
                    self._move_crate(direction, _left(target), True)
                    self._move_crate(direction, _right(target), True)
            else:
                raise ValueError("crate halves out of order")

        if movable and do_it:
            self._shift(crate, target)
        return movable

    def render(self) -> str:
        """Draw the warehouse with ``@`` for the robot, one line per row."""
        width, height = self.size
        rows = []
        for y in range(height):
            row = "".join(
                "@" if self.robot == (x, y) else self.tiles[(x, y)].value
                for x in range(2 * width)
            )
            rows.append(row + "\n")
        return "".join(rows)

    def score(self) -> int:
        """Sum of ``100 * y + x`` over the left halves of all crates."""
        return sum(
            100 * y + x for (x, y), tile in self.tiles.items() if tile is Tile.CRATE_LEFT
        )


def parse_map(text: str) -> Warehouse:
    """Read the warehouse map, doubling every tile in width."""
    warehouse = Warehouse()
    width, height = 0, 0
    for y, line in enumerate(text.splitlines()):
        height += 1
        width = len(line)
        for x, char in enumerate(line):
            left, right = (2 * x, y), (2 * x + 1, y)
            if char == "@":
                warehouse.robot = left
            if char == "#":
                warehouse.tiles[left] = warehouse.tiles[right] = Tile.WALL
            elif char == "O":
                warehouse.tiles[left] = Tile.CRATE_LEFT
                warehouse.tiles[right] = Tile.CRATE_RIGHT
            else:
                warehouse.tiles[left] = warehouse.tiles[right] = Tile.EMPTY
    warehouse.size = (width, height)
    return warehouse


def part_one(input_text: str) -> int:
    map_text, moves = input_text.split("\n\n")[:2]
    warehouse = parse_map(map_text)
    for direction in moves:
        if direction != "\n":
            warehouse.step(direction)
    return warehouse.score()


def part_two(input_text: str) -> None:
    return None


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()