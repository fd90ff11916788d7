from dataclasses import replace

from advent2024.days.day06 import (
    BoardState,
    StepResult,
    compute_game,
    parse,
    part_one,
    part_two,
)

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def test_part_one():
    assert part_one(EXAMPLE) == 41


def test_part_two():
    assert part_two(EXAMPLE) == 6


def test_parse_finds_guard():
    game = parse(EXAMPLE)
    assert game.position == (4, 6)
    assert game.direction == (0, -1)
    assert game.size == (10, 10)
    assert game.board[0][4] is False


def test_step_moves_then_turns():
    game = parse(EXAMPLE)
    assert game.step() is StepResult.CONTINUE
    assert game.position == (4, 5)
    game.position = (4, 1)
    assert game.step() is StepResult.CONTINUE
    assert game.position == (4, 1)
    assert game.direction == (1, 0)


def test_single_cell_exits():
    game = parse("^\n")
    result, positions = compute_game(game)
    assert result is StepResult.EXIT
    assert positions == {(0, 0)}


def test_extra_obstacle_causes_loop():
    game = parse(EXAMPLE)
    result, _ = compute_game(replace(game, extra_obstacle=(3, 6)))
    assert result is StepResult.LOOP


def test_repeated_state_is_loop():
    game = BoardState(board=[[True]], size=(1, 1), position=(0, 0), direction=(0, -1))
    game.visited.add(((0, 0), (0, -1)))
    assert game.step() is StepResult.LOOP