from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple

from esper import World

from tilecascade.components.board import Board
from tilecascade.components.board_position import BoardPosition
from tilecascade.components.board_state import BoardState
from tilecascade.components.thresholds import GroupSizeThresholds
from tilecascade.components.tile import TileColor

Position = Tuple[int, int]


def get_board(world: World) -> Board | None:
    for _, board in world.get_component(Board):
        return board
    return None


def get_thresholds(world: World) -> GroupSizeThresholds:
    for _, thresholds in world.get_component(GroupSizeThresholds):
        return thresholds
    return GroupSizeThresholds()


def get_or_create_board_state(world: World) -> BoardState:
    """Return the shared BoardState component, creating it if absent."""
    existing = list(world.get_component(BoardState))
    if existing:
        return existing[0][1]
    world.create_entity(BoardState())
    return list(world.get_component(BoardState))[0][1]


def get_random(world: World) -> random.Random:
    rng = getattr(world, "random", None)
    if isinstance(rng, random.Random):
        return rng
    rng = random.Random()
    setattr(world, "random", rng)
    return rng


def tile_color(world: World, tile: Optional[int]) -> int | None:
    if tile is None:
        return None
    try:
        return world.component_for_entity(tile, TileColor).color_index
    except KeyError:
        return None


def place_tile(world: World, board: Board, row: int, col: int, tile: Optional[int]) -> bool:
    """Put ``tile`` into a cell and point its BoardPosition at that cell."""
    if not board.set(row, col, tile):
        return False
    if tile is None:
        return True
    try:
        position = world.component_for_entity(tile, BoardPosition)
    except KeyError:
        world.add_component(tile, BoardPosition(row=row, col=col))
    else:
        position.row = row
        position.col = col
    return True


def color_grid(world: World) -> List[List[Optional[int]]]:
    """Return the board as a matrix of color indices (None for empty cells)."""
    board = get_board(world)
    if board is None:
        return []
    return [[tile_color(world, tile) for tile in line] for line in board.cells]


def tile_positions(world: World) -> Dict[int, Position]:
    board = get_board(world)
    if board is None:
        return {}
    return {tile: (row, col) for row, col, tile in board.occupied()}


def occupied_count(world: World) -> int:
    board = get_board(world)
    if board is None:
        return 0
    return len(board.occupied())
