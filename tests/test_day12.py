from advent2024.days.day12 import (
    discount_price,
    fence_price,
    get_sides,
    parse,
    part_one,
    split_into_regions,
)

EXAMPLE = """AAAA
BBCD
BBCC
EEEC
"""

NESTED = """OOOOO
OXOXO
OOOOO
OXOXO
OOOOO
"""


def test_parse():
    assert parse("AB\nCD\n") == [["A", "B"], ["C", "D"]]


def test_split_into_regions_count():
    assert len(split_into_regions(parse(EXAMPLE))) == 5
    assert len(split_into_regions(parse(NESTED))) == 5


def test_regions_cover_all_plots():
    regions = split_into_regions(parse(EXAMPLE))
    cells = [cell for region in regions for cell in region]
    assert len(cells) == 16
    assert len(set(cells)) == 16


def test_part_one_examples():
    assert part_one(EXAMPLE) == 140
    assert part_one(NESTED) == 772


def test_fence_price_single_cell():
    assert fence_price([(0, 0)]) == 4


def test_fence_price_square():
    assert fence_price([(0, 0), (1, 0), (0, 1), (1, 1)]) == 32


def test_get_sides_row_of_cells():
    row = [(0, 0), (1, 0), (2, 0)]
    assert len(get_sides(row, True)) == 3
    vertical = get_sides(row, False)
    assert len(vertical) == 1
    assert sorted(vertical[0]) == row


def test_get_sides_column_of_cells():
    column = [(0, 0), (0, 1), (0, 2)]
    assert len(get_sides(column, True)) == 1
    assert len(get_sides(column, False)) == 3


def test_discount_price_single_cell():
    assert discount_price([(0, 0)]) == 2