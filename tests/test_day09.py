import pytest

from advent2024.days.day09 import check_sum, parse, part_one, part_two

EXAMPLE = "2333133121414131402\n"


def test_part_one():
    assert part_one(EXAMPLE) == 1928


def test_part_two():
    assert part_two(EXAMPLE) == 2858


def test_parse_expands_blocks():
    assert parse("12345") == [
        0, None, None, 1, 1, 1, None, None, None, None, 2, 2, 2, 2, 2,
    ]


def test_parse_block_count():
    disk = parse(EXAMPLE)
    assert len(disk) == 42
    assert sum(1 for block in disk if block is not None) == 28


def test_parse_rejects_non_digits():
    with pytest.raises(ValueError):
        parse("12a4")


def test_check_sum_ignores_free_space():
    assert check_sum([None, None]) == 0
    assert check_sum([None, 3]) == 3
    assert check_sum([0, 0, 9]) == 18