from advent2024.days.day11 import (
    count_stones,
    parse,
    part_one,
    part_two,
    step,
    step_counts,
)

EXAMPLE = "125 17\n"


def test_parse():
    assert parse(EXAMPLE) == [125, 17]


def test_step_sequence():
    first = step([125, 17])
    assert first == [253000, 1, 7]
    assert step(first) == [253, 0, 2024, 14168]


def test_step_rules():
    assert step([0, 1, 10, 99, 999]) == [1, 2024, 1, 0, 9, 9, 2021976]


def test_part_one_example():
    assert part_one(EXAMPLE) == 55312


def test_count_stones_matches_example():
    assert count_stones(125, 25) + count_stones(17, 25) == 55312


def test_count_stones_zero_steps():
    assert count_stones(12345, 0) == 1


def test_step_counts():
    assert step_counts({125: 1, 17: 1}) == {253000: 1, 1: 1, 7: 1}


def test_step_counts_after_six_blinks():
    counts = {125: 1, 17: 1}
    for _ in range(6):
        counts = step_counts(counts)
    assert sum(counts.values()) == 22


def test_part_two_agrees_with_count_stones():
    assert part_two(EXAMPLE) == count_stones(125, 75) + count_stones(17, 75)