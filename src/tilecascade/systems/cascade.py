from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List

from esper import World

from tilecascade.components.board import Position
from tilecascade.factories.tile_factory import TileFactory
from tilecascade.systems.board_ops import get_board, place_tile


@dataclass(slots=True)
class GravityMove:
    tile: int
    source: Position
    target: Position

    def as_payload(self) -> dict:
        return {'tile': self.tile, 'from': self.source, 'to': self.target}


def cascade(world: World) -> List[GravityMove]:
    """Compact every column downward, keeping the tiles' relative order.

    Each column is scanned bottom-to-top; all empty cells end up at the top.
    Running it on an already compacted board returns no moves.
    """
    board = get_board(world)
    if board is None:
        return []
    moves: List[GravityMove] = []
    for col in range(board.cols):
        empty_row = -1
        for row in range(board.rows - 1, -1, -1):
            tile = board.cells[row][col]
            if tile is None:
                if empty_row == -1:
                    empty_row = row
            elif empty_row != -1:
                board.set(row, col, None)
                place_tile(world, board, empty_row, col, tile)
                moves.append(GravityMove(tile=tile, source=(row, col), target=(empty_row, col)))
                empty_row -= 1
    return moves


def refill(world: World, factory: TileFactory, rng: random.Random) -> List[Position]:
    """Create a tile in every empty cell, columns left to right, rows bottom-up.

    Colors are drawn uniformly from ``[0, board.colors)``.
    """
    board = get_board(world)
    if board is None:
        return []
    spawned: List[Position] = []
    for col in range(board.cols):
        for row in range(board.rows - 1, -1, -1):
            if board.cells[row][col] is not None:
                continue
            tile = factory.create(rng.randrange(board.colors), row, col)
            place_tile(world, board, row, col, tile)
            spawned.append((row, col))
    return spawned


def is_compacted(world: World) -> bool:
    """True when no column has an occupied cell above an empty one."""
    board = get_board(world)
    if board is None:
        return True
    for col in range(board.cols):
        seen_empty = False
        for row in range(board.rows - 1, -1, -1):
            if board.cells[row][col] is None:
                seen_empty = True
            elif seen_empty:
                return False
    return True
