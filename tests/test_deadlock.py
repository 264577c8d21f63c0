from tilecascade.systems.deadlock import find_any_move, has_any_move
from tests.helpers import build_board, set_board_colors


def test_checkerboard_has_no_move():
    _, world, system = build_board(4, 4, colors=2)
    set_board_colors(system, [[(row + col) % 2 for col in range(4)] for row in range(4)])
    assert not has_any_move(world)
    assert find_any_move(world) is None


def test_single_horizontal_pair_is_a_move():
    _, world, system = build_board(3, 3)
    set_board_colors(system, [
        [0, 1, 2],
        [3, 4, 4],
        [0, 1, 2],
    ])
    assert has_any_move(world)
    assert find_any_move(world) == ((1, 1), (1, 2))


def test_vertical_pair_is_a_move():
    _, world, system = build_board(3, 3)
    set_board_colors(system, [
        [0, 1, 2],
        [3, 4, 2],
        [0, 1, 5],
    ])
    assert find_any_move(world) == ((0, 2), (1, 2))


def test_empty_cells_never_pair():
    _, world, system = build_board(2, 2, colors=2)
    set_board_colors(system, [
        [None, None],
        [0, 1],
    ])
    assert not has_any_move(world)
