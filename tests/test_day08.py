from advent2024.days.day08 import find_antinodes, parse, part_one, part_two

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def test_part_one():
    assert part_one(EXAMPLE) == 14


def test_part_two():
    assert part_two(EXAMPLE) == 34


def test_parse():
    board = parse(EXAMPLE)
    assert board.size == (12, 12)
    assert board.antennas["0"] == [(8, 1), (5, 2), (7, 3), (4, 4)]
    assert board.antennas["A"] == [(6, 5), (8, 8), (9, 9)]


def test_parse_stops_at_blank_line():
    board = parse("a.\n..\n\nb.\n")
    assert board.size == (2, 2)
    assert set(board.antennas) == {"a"}


def test_find_antinodes_single_step():
    assert find_antinodes((4, 3), (5, 5), (10, 10), True) == [(3, 1), (6, 7)]


def test_find_antinodes_includes_antennas_when_unlimited():
    points = find_antinodes((0, 0), (1, 1), (4, 4), False)
    assert (0, 0) in points
    assert (1, 1) in points
    assert (3, 3) in points