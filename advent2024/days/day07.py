"""Day 7: Bridge Repair."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import product

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(7)

_U64_MAX = 2**64 - 1
_LINE = re.compile(r"([0-9]+): ([0-9]+(?: [0-9]+)*)")


class Operator(Enum):
    PLUS = "+"
    MUL = "*"
    CONCAT = "||"


@dataclass(frozen=True)
class Equation:
    """A calibration target and the numbers that may combine into it."""

    result: int
    inputs: tuple[int, ...]

    def slots(self) -> int:
        return len(self.inputs) - 1


def parse_line(line: str) -> Equation:
    match = _LINE.match(line)
    if match is None:
        raise ValueError(f"not an equation: {line!r}")
    return Equation(int(match[1]), tuple(int(value) for value in match[2].split(" ")))


def parse(input_text: str) -> list[Equation]:
    """Parse equations line by line, stopping at the first line that is not one."""
    equations: list[Equation] = []
    for line in input_text.splitlines():
        match = _LINE.match(line)
        if match is None:
            break
        equations.append(parse_line(line))
        if match.end() != len(line):
            break
    if not equations:
        raise ValueError("expected at least one equation")
    return equations


def _concat(acc: int, value: int) -> int:
    if value == 0:
        raise ValueError("cannot concatenate zero")
    return acc * 10 ** len(str(value)) + value


def compute(data: Equation, ops: Sequence[Operator]) -> int:
    """Evaluate the inputs left to right with ``ops``; sums and products saturate."""
    acc = data.inputs[0]
    for value, op in zip(data.inputs[1:], ops):
        if op is Operator.PLUS:
            acc = min(acc + value, _U64_MAX)
        elif op is Operator.MUL:
            acc = min(acc * value, _U64_MAX)
        else:
            acc = _concat(acc, value)
    return acc


def is_valid(data: Equation, ops: Sequence[Operator]) -> bool:
    return compute(data, ops) == data.result


def _is_possible(data: Equation, possible_ops: Sequence[Operator]) -> bool:
    return any(is_valid(data, ops) for ops in product(possible_ops, repeat=data.slots()))


def _compute_sum(input_text: str, possible_ops: Sequence[Operator]) -> int:
    return sum(
        equation.result
        for equation in parse(input_text)
        if _is_possible(equation, possible_ops)
    )


def part_one(input_text: str) -> int:
    return _compute_sum(input_text, (Operator.PLUS, Operator.MUL))


def part_two(input_text: str) -> int:
    return _compute_sum(input_text, (Operator.PLUS, Operator.MUL, Operator.CONCAT))


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()