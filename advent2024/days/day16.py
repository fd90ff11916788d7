"""Day 16: Reindeer Maze."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import count

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(16)

Point = tuple[int, int]

_STEP_COST = 1
_TURN_COST = 1000


class Direction(Enum):
    EAST = (1, 0)
    WEST = (-1, 0)
    NORTH = (0, -1)
    SOUTH = (0, 1)


_TURNS = {
    Direction.EAST: (Direction.NORTH, Direction.SOUTH),
    Direction.WEST: (Direction.NORTH, Direction.SOUTH),
    Direction.NORTH: (Direction.EAST, Direction.WEST),
    Direction.SOUTH: (Direction.EAST, Direction.WEST),
}


@dataclass(frozen=True)
class Reindeer:
    """A reindeer's facing and tile."""

    direction: Direction
    pos: Point


def parse_maze(input_text: str) -> tuple[list[list[bool]], Point, Point]:
    """Return the maze (True for walls), the start tile and the end tile."""
    start: Point = (0, 0)
    end: Point = (0, 0)
    maze: list[list[bool]] = []
    for y, line in enumerate(input_text.splitlines()):
        row = []
        for x, char in enumerate(line):
            if char == "S":
                start = (x, y)
            elif char == "E":
                end = (x, y)
            row.append(char == "#")
        maze.append(row)
    return maze, start, end


def compute_neighbors(deer: Reindeer) -> list[tuple[Reindeer, int]]:
    """A step forward, then the two quarter turns, each with its cost."""
    dx, dy = deer.direction.value
    x, y = deer.pos
    forward = (Reindeer(deer.direction, (x + dx, y + dy)), _STEP_COST)
    turns = [(Reindeer(turn, deer.pos), _TURN_COST) for turn in _TURNS[deer.direction]]
    return [forward, *turns]


def _is_wall(maze: Sequence[Sequence[bool]], pos: Point) -> bool:
    x, y = pos
    if not (0 <= y < len(maze) and 0 <= x < len(maze[y])):
        raise ValueError(f"position {pos} is outside the maze")
    return maze[y][x]


def find_path(maze: Sequence[Sequence[bool]], start: Reindeer, end_pos: Point) -> int:
    """Lowest score from ``start`` to any facing on ``end_pos``."""
    visited: set[Reindeer] = set()
    frontier: list[tuple[int, int, Reindeer]] = []
    dist = {start: 0}
    tie = count()
    deer = start
    while True:
        distance = dist[deer]
        if deer.pos == end_pos:
            return distance
        visited.add(deer)
        for neighbour, cost in compute_neighbors(deer):
            if _is_wall(maze, neighbour.pos) or neighbour in visited:
                continue
            candidate = distance + cost
            if neighbour not in dist or dist[neighbour] > candidate:
                dist[neighbour] = candidate
            heapq.heappush(frontier, (candidate, next(tie), neighbour))
        if not frontier:
            raise ValueError("the end tile cannot be reached")
        deer = heapq.heappop(frontier)[2]


def part_one(input_text: str) -> int:
    maze, start, end = parse_maze(input_text)
    return find_path(maze, Reindeer(Direction.EAST, start), end)


def part_two(input_text: str) -> None:
    return None


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()