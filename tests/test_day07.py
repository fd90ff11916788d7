import pytest

from advent2024.days.day07 import (
    Equation,
    Operator,
    compute,
    is_valid,
    parse,
    parse_line,
    part_one,
    part_two,
)

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_part_one():
    assert part_one(EXAMPLE) == 3749


def test_part_two():
    assert part_two(EXAMPLE) == 11387


def test_parse_line():
    assert parse_line("190: 10 19") == Equation(190, (10, 19))


def test_parse_line_rejects_garbage():
    with pytest.raises(ValueError):
        parse_line("no numbers")


def test_parse_counts_equations():
    equations = parse(EXAMPLE)
    assert len(equations) == 9
    assert equations[-1] == Equation(292, (11, 6, 16, 20))


def test_slots():
    assert Equation(7290, (6, 8, 6, 15)).slots() == 3


def test_compute_operators():
    assert compute(Equation(190, (10, 19)), [Operator.MUL]) == 190
    assert compute(Equation(29, (10, 19)), [Operator.PLUS]) == 29
    assert compute(Equation(156, (15, 6)), [Operator.CONCAT]) == 156


def test_compute_saturates():
    assert compute(Equation(0, (2**63, 4)), [Operator.MUL]) == 2**64 - 1


def test_is_valid():
    data = Equation(3267, (81, 40, 27))
    assert is_valid(data, [Operator.PLUS, Operator.MUL]) is True
    assert is_valid(data, [Operator.PLUS, Operator.PLUS]) is False