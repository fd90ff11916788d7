"""Day 5: Print Queue."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from itertools import pairwise

from advent2024.template.day import Day, read_file
from advent2024.template.runner import run_part

DAY = Day(5)

_RULE = re.compile(r"([0-9]+)\|([0-9]+)(?:\r\n|\n)")
_ISSUE = re.compile(r"([0-9]+(?:,[0-9]+)*)(?:\r\n|\n)")
_LINE_ENDING = re.compile(r"\r\n|\n")

Rule = tuple[int, int]


@dataclass
class SafetyManual:
    """Page ordering rules and the updates to check against them."""

    rules: list[Rule] = field(default_factory=list)
    issues: list[list[int]] = field(default_factory=list)


def parse_input(input_text: str) -> SafetyManual:
    """Parse the rules, a blank line, then the updates; trailing text is ignored."""
    manual = SafetyManual()
    pos = 0
    while match := _RULE.match(input_text, pos):
        manual.rules.append((int(match[1]), int(match[2])))
        pos = match.end()
    if not manual.rules:
        raise ValueError("expected at least one ordering rule")

    separator = _LINE_ENDING.match(input_text, pos)
    if separator is None:
        raise ValueError("expected a blank line after the ordering rules")
    pos = separator.end()

    while match := _ISSUE.match(input_text, pos):
        manual.issues.append([int(page) for page in match[1].split(",")])
        pos = match.end()
    if not manual.issues:
        raise ValueError("expected at least one update")
    return manual


def take_middle(issue: Sequence[int]) -> int:
    return issue[len(issue) // 2]


def order(a: int, b: int, rules: Sequence[Rule]) -> int:
    """-1 if a rule puts ``a`` before ``b``, 1 otherwise; the pair must have a rule."""
    for rule in rules:
        if rule == (a, b) or rule == (b, a):
            return -1 if rule[0] == a else 1
    raise ValueError(f"no ordering rule for pages {a} and {b}")


def check_issue(issue: Sequence[int], rules: Sequence[Rule]) -> bool:
    """True if every neighbouring pair of pages is in rule order."""
    return all(order(a, b, rules) != 1 for a, b in pairwise(issue))


def check_rule(issue: Sequence[int], rule: Rule) -> bool:
    """True unless both pages of ``rule`` appear and the first comes after the last second."""
    before, after = rule
    if before not in issue or after not in issue:
        return True
    first = issue.index(before)
    last = len(issue) - 1 - list(reversed(issue)).index(after)
    return first < last


def reorder(issue: Sequence[int], rules: Sequence[Rule]) -> list[int]:
    return sorted(issue, key=cmp_to_key(lambda a, b: order(a, b, rules)))


def part_one(input_text: str) -> int:
    manual = parse_input(input_text)
    return sum(
        take_middle(issue) for issue in manual.issues if check_issue(issue, manual.rules)
    )


def part_two(input_text: str) -> int:
    manual = parse_input(input_text)
    return sum(
        take_middle(reorder(issue, manual.rules))
        for issue in manual.issues
        if not check_issue(issue, manual.rules)
    )


def main(argv: Sequence[str] | None = None) -> None:
    input_text = read_file("inputs", DAY)
    run_part(part_one, input_text, DAY, 1, argv)
    run_part(part_two, input_text, DAY, 2, argv)


if __name__ == "__main__":
    main()