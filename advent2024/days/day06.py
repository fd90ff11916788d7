"""Day 6: Guard Gallivant."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(6)

Point = tuple[int, int]

_GUARD_DIRECTIONS = {"^": (0, -1), "<": (-1, 0), "v": (0, 1), ">": (1, 0)}
_TURN_RIGHT = {(0, 1): (-1, 0), (0, -1): (1, 0), (-1, 0): (0, -1), (1, 0): (0, 1)}


class StepResult(Enum):
    LOOP = "loop"
    EXIT = "exit"
    CONTINUE = "continue"


@dataclass
class BoardState:
    """The lab map (True where free) and the guard's walk so far."""

    board: list[list[bool]]
    size: Point
    position: Point
    direction: Point
    visited: set[tuple[Point, Point]] = field(default_factory=set)
    extra_obstacle: Point | None = None

    def distinct_positions(self) -> set[Point]:
        return {position for position, _ in self.visited}

    def step(self) -> StepResult:
        """Move the guard one step forward, or turn right when blocked."""
        state = (self.position, self.direction)
        if state in self.visited:
            return StepResult.LOOP
        self.visited.add(state)

        next_x = self.position[0] + self.direction[0]
        next_y = self.position[1] + self.direction[1]
        width, height = self.size
        if not (0 <= next_x < width and 0 <= next_y < height):
            return StepResult.EXIT

        if not self.board[next_y][next_x] or self.extra_obstacle == (next_x, next_y):
            try:
                self.direction = _TURN_RIGHT[self.direction]
            except KeyError:
                raise ValueError(f"impossible direction {self.direction}") from None
            return StepResult.CONTINUE

        self.position = (next_x, next_y)
        return StepResult.CONTINUE


def parse(input_text: str) -> BoardState:
    lines = input_text.splitlines()
    board = [[char != "#" for char in line] for line in lines]
    guard = next(
        (((x, y), _GUARD_DIRECTIONS[char]))
        for y, line in enumerate(lines)
        for x, char in enumerate(line)
        if char in _GUARD_DIRECTIONS
    )
    return BoardState(
        board=board,
        size=(len(board[0]), len(board)),
        position=guard[0],
        direction=guard[1],
    )


def compute_game(game: BoardState) -> tuple[StepResult, set[Point]]:
    """Walk the guard until it leaves the map or loops."""
    while (result := game.step()) is StepResult.CONTINUE:
        pass
    return result, game.distinct_positions()


def part_one(input_text: str) -> int:
    _, positions = compute_game(parse(input_text))
    return len(positions)


def part_two(input_text: str) -> int:
    game = parse(input_text)
    _, positions = compute_game(replace(game, visited=set()))
    return sum(
        1
        for obstacle in positions
        if compute_game(replace(game, visited=set(), extra_obstacle=obstacle))[0]
        is StepResult.LOOP
    )


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()