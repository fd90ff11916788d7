from advent2024.days.day03 import part_one, part_two

EXAMPLE = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part_one():
    assert part_one(EXAMPLE) == 161


def test_part_two():
    assert part_two(EXAMPLE) == 48


def test_malformed_instructions_are_skipped():
    assert part_one("mul(2,3)mul( 1,2)mul(4*5)mul(3,3") == 6


def test_part_one_ignores_switches():
    assert part_one("don't()mul(2,5)") == 10
    assert part_two("don't()mul(2,5)do()mul(1,1)") == 1