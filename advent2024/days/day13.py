"""Day 13: Claw Contraption."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(13)

Point = tuple[int, int]

_PART_TWO_OFFSET = 10_000_000_000_000
_MACHINE = re.compile(
    r"Button A: X\+([0-9]+), Y\+([0-9]+)\n"
    r"Button B: X\+([0-9]+), Y\+([0-9]+)\n"
    r"Prize: X=([0-9]+), Y=([0-9]+)"
)


@dataclass(frozen=True)
class ClawMachine:
    """Button moves and prize location of one claw machine."""

    a: Point
    b: Point
    prize: Point


def parse_machines(input_text: str) -> list[ClawMachine]:
    """Parse the blank-line separated machine descriptions."""
    machines: list[ClawMachine] = []
    for block in input_text.rstrip("\n").split("\n\n"):
        match = _MACHINE.fullmatch(block)
        if match is None:
            raise ValueError(f"not a claw machine: {block!r}")
        ax, ay, bx, by, px, py = (int(value) for value in match.groups())
        machines.append(ClawMachine(a=(ax, ay), b=(bx, by), prize=(px, py)))
    return machines


def _div_trunc(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def solve_machine(machine: ClawMachine, offset: int) -> int | None:
    """Token cost to win the prize moved by ``offset``, or None if unreachable."""
    px, py = machine.prize[0] + offset, machine.prize[1] + offset
    (ax, ay), (bx, by) = machine.a, machine.b
    det = ax * by - ay * bx
    a = _div_trunc(px * by - py * bx, det)
    b = _div_trunc(ax * py - ay * px, det)
    if (ax * a + bx * b, ay * a + by * b) == (px, py):
        return a * 3 + b
    return None


def _total_cost(input_text: str, offset: int) -> int:
    return sum(
        cost
        for machine in parse_machines(input_text)
        if (cost := solve_machine(machine, offset)) is not None
    )


def part_one(input_text: str) -> int:
    return _total_cost(input_text, 0)


def part_two(input_text: str) -> int:
    return _total_cost(input_text, _PART_TWO_OFFSET)


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()