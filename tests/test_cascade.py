import random

from tilecascade.components.board_position import BoardPosition
from tilecascade.systems.cascade import cascade, is_compacted, refill
from tests.helpers import build_board, set_board_colors


def test_cascade_compacts_columns_preserving_order():
    _, world, system = build_board(3, 2)
    set_board_colors(system, [
        [1, 3],
        [None, 4],
        [2, None],
    ])
    board = system.board
    top_left = board.get(0, 0)
    top_right = board.get(0, 1)
    middle_right = board.get(1, 1)

    moves = cascade(world)

    assert system.snapshot() == [
        [None, None],
        [1, 3],
        [2, 4],
    ]
    assert board.get(1, 0) == top_left
    assert board.get(1, 1) == top_right
    assert board.get(2, 1) == middle_right
    pos = world.component_for_entity(top_left, BoardPosition)
    assert (pos.row, pos.col) == (1, 0)
    assert {(m.source, m.target) for m in moves} == {
        ((0, 0), (1, 0)),
        ((1, 1), (2, 1)),
        ((0, 1), (1, 1)),
    }
    assert is_compacted(world)


def test_cascade_is_idempotent():
    _, world, system = build_board(4, 2)
    set_board_colors(system, [
        [0, None],
        [None, 1],
        [2, None],
        [None, 3],
    ])
    cascade(world)
    settled = system.snapshot()
    assert cascade(world) == []
    assert system.snapshot() == settled


def test_refill_fills_columns_bottom_up():
    _, world, system = build_board(3, 2)
    set_board_colors(system, [
        [None, None],
        [None, 5],
        [4, 5],
    ])
    spawned = refill(world, system.factory, random.Random(7))
    assert spawned == [(1, 0), (0, 0), (0, 1)]
    board = system.board
    assert len(board.occupied()) == 6
    assert all(0 <= color < board.colors for line in system.snapshot() for color in line)
