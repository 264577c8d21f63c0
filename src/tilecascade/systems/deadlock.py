from __future__ import annotations

from typing import Optional, Tuple

from esper import World

from tilecascade.components.board import Position
from tilecascade.systems.board_ops import get_board, tile_color


def find_any_move(world: World) -> Optional[Tuple[Position, Position]]:
    """Return the first pair of 4-adjacent occupied cells sharing a color.

    Only the right and down neighbours are checked so each pair is seen once.
    """
    board = get_board(world)
    if board is None:
        return None
    for row in range(board.rows):
        for col in range(board.cols):
            tile = board.cells[row][col]
            if tile is None:
                continue
            color = tile_color(world, tile)
            if col + 1 < board.cols:
                right = board.cells[row][col + 1]
                if right is not None and tile_color(world, right) == color:
                    return (row, col), (row, col + 1)
            if row + 1 < board.rows:
                down = board.cells[row + 1][col]
                if down is not None and tile_color(world, down) == color:
                    return (row, col), (row + 1, col)
    return None


def has_any_move(world: World) -> bool:
    """False when the board is deadlocked: no clickable group of two or more exists."""
    return find_any_move(world) is not None
