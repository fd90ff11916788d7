"""Day 3: Mull It Over."""

from __future__ import annotations

import re
from collections.abc import Sequence

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(3)

_U32_MAX = 2**32 - 1
_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_INSTRUCTION = re.compile(r"(do\(\))|(don't\(\))|mul\(([0-9]+),([0-9]+)\)")


def _product(a: str, b: str) -> int | None:
    left, right = int(a), int(b)
    if left > _U32_MAX or right > _U32_MAX:
        return None
    return left * right


def part_one(input_text: str) -> int:
    """Sum the products of every well-formed ``mul(a,b)``."""
    return sum(
        product
        for match in _MUL.finditer(input_text)
        if (product := _product(match[1], match[2])) is not None
    )


def part_two(input_text: str) -> int:
    """Like part one, but ``do()`` and ``don't()`` switch products on and off."""
    total = 0
    enabled = True
    for match in _INSTRUCTION.finditer(input_text):
        if match[1]:
            enabled = True
        elif match[2]:
            enabled = False
        else:
            product = _product(match[3], match[4])
            if product is not None and enabled:
                total += product
    return total


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()