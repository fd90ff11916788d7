import pytest

from advent2024.days.day15 import Tile, move_pos, parse_map, part_one, part_two

ROW_MAP = "#####\n#.O@#\n#####"
COLUMN_MAP = "#####\n#...#\n#.O.#\n#.@.#\n#####"


def test_parse_map_doubles_width():
    warehouse = parse_map(ROW_MAP)
    assert warehouse.size == (5, 3)
    assert warehouse.robot == (6, 1)
    assert warehouse.tiles[(4, 1)] is Tile.CRATE_LEFT
    assert warehouse.tiles[(5, 1)] is Tile.CRATE_RIGHT
    assert warehouse.tiles[(1, 1)] is Tile.WALL
    assert warehouse.tiles[(7, 1)] is Tile.EMPTY


def test_render():
    warehouse = parse_map(ROW_MAP)
    assert warehouse.render() == "##########\n##..[]@.##\n##########\n"


def test_push_left_until_wall():
    warehouse = parse_map(ROW_MAP)
    warehouse.step("<")
    assert warehouse.robot == (5, 1)
    assert warehouse.score() == 103
    warehouse.step("<")
    warehouse.step("<")
    assert warehouse.robot == (4, 1)
    assert warehouse.score() == 102


def test_push_up_until_wall():
    warehouse = parse_map(COLUMN_MAP)
    warehouse.step("^")
    assert warehouse.robot == (4, 2)
    assert warehouse.score() == 104
    warehouse.step("^")
    assert warehouse.robot == (4, 2)
    assert warehouse.score() == 104


def test_robot_stops_at_wall():
    warehouse = parse_map("####\n#@.#\n####")
    warehouse.step("<")
    assert warehouse.robot == (2, 1)


def test_part_one():
    assert part_one(ROW_MAP + "\n\n<<<\n") == 102


def test_part_two():
    assert part_two(ROW_MAP + "\n\n<\n") is None


def test_move_pos():
    assert move_pos((3, 3), "^") == (3, 2)
    assert move_pos((3, 3), "v") == (3, 4)
    assert move_pos((3, 3), "<") == (2, 3)
    assert move_pos((3, 3), ">") == (4, 3)


def test_move_pos_rejects_unknown_direction():
    with pytest.raises(ValueError):
        move_pos((0, 0), "x")