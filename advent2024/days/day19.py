"""Day 19: Linen Layout."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(19)

_INPUT = re.compile(r"([A-Za-z]+(?:, [A-Za-z]+)*)\n\n([A-Za-z]+(?:\n[A-Za-z]+)*)")


@dataclass
class TrieNode:
    """A prefix tree of towel patterns."""

    is_end: bool = False
    children: dict[str, TrieNode] = field(default_factory=dict)

    def add(self, word: str) -> None:
        node = self
        for letter in word:
            node = node.children.setdefault(letter, TrieNode())
        node.is_end = True


def parse(input_text: str) -> tuple[list[str], list[str]]:
    """Return the towel patterns and the designs to build."""
    match = _INPUT.match(input_text)
    if match is None:
        raise ValueError("expected towel patterns, a blank line, then designs")
    return match[1].split(", "), match[2].split("\n")


def count_arrangements(word: str, root: TrieNode) -> int:
    """Number of ways to build ``word`` from the patterns stored in ``root``."""
    if not word:
        raise ValueError("design must not be empty")
    length = len(word)
    ways = [0] * length + [1]
    for start in reversed(range(length)):
        node = root
        total = 0
        for end in range(start, length):
            node = node.children.get(word[end])
            if node is None:
                break
            if node.is_end:
                total += ways[end + 1]
        ways[start] = total
    return ways[0]


def part_one(input_text: str) -> int:
    towels, targets = parse(input_text)
    root = TrieNode()
    for towel in towels:
        root.add(towel)
    return sum(count_arrangements(target, root) for target in targets)


def part_two(input_text: str) -> None:
    return None


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()