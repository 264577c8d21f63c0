"""Deadlock-breaking reshuffle.

The primary path picks two tiles of one color (the anchor pair), drops them
onto a random pair of adjacent cells and scatters the rest around them, which
guarantees at least one clickable group. When no color has two tiles, or the
board has no adjacent cell pair, every tile is shuffled in place instead and
the board may stay deadlocked.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, MutableSequence, Optional, Tuple, TypeVar

from esper import World

from tilecascade.components.board import Board, Position
from tilecascade.constants import SHUFFLE_WINDOW
from tilecascade.systems.board_ops import get_board, place_tile, tile_color
from tilecascade.systems.cascade import GravityMove

T = TypeVar("T")


@dataclass(slots=True)
class ReshuffleResult:
    anchored: bool
    moves: List[GravityMove] = field(default_factory=list)
    anchor_cells: Optional[Tuple[Position, Position]] = None


def local_biased_shuffle(items: MutableSequence[T], rng: random.Random) -> None:
    """Fisher-Yates variant where each element only swaps within a short window.

    Element ``i`` swaps with an index drawn from ``[max(0, i - 2), i]``, so
    tiles drift locally instead of being scattered across the whole board.
    """
    for i in range(len(items) - 1, 0, -1):
        swap_index = rng.randint(max(0, i - SHUFFLE_WINDOW), i)
        items[i], items[swap_index] = items[swap_index], items[i]


def adjacent_cell_pairs(board: Board) -> List[Tuple[Position, Position]]:
    pairs: List[Tuple[Position, Position]] = []
    for row, col in board.positions():
        if col + 1 < board.cols:
            pairs.append(((row, col), (row, col + 1)))
        if row + 1 < board.rows:
            pairs.append(((row, col), (row + 1, col)))
    return pairs


def pick_anchor_pair(world: World, tiles: List[int], rng: random.Random) -> Optional[Tuple[int, int]]:
    """Choose two same-colored tiles, or None when every color is unique."""
    by_color: Dict[int, List[int]] = {}
    for tile in tiles:
        by_color.setdefault(tile_color(world, tile), []).append(tile)
    candidates = sorted(color for color, members in by_color.items() if len(members) >= 2)
    if not candidates:
        return None
    members = by_color[rng.choice(candidates)]
    first, second = rng.sample(members, 2)
    return first, second


def _rebuild(world: World, board: Board, placement: Dict[Position, int], previous: Dict[int, Position]) -> List[GravityMove]:
    board.clear()
    moves: List[GravityMove] = []
    for (row, col), tile in placement.items():
        place_tile(world, board, row, col, tile)
        source = previous[tile]
        if source != (row, col):
            moves.append(GravityMove(tile=tile, source=source, target=(row, col)))
    return moves


def reshuffle(world: World, rng: random.Random) -> ReshuffleResult:
    board = get_board(world)
    if board is None:
        return ReshuffleResult(anchored=False)
    occupied = board.occupied()
    tiles = [tile for _, _, tile in occupied]
    previous = {tile: (row, col) for row, col, tile in occupied}

    anchor = pick_anchor_pair(world, tiles, rng)
    slots = adjacent_cell_pairs(board)
    if anchor is None or not slots:
        local_biased_shuffle(tiles, rng)
        placement = {(row, col): tile for (row, col, _), tile in zip(occupied, tiles)}
        return ReshuffleResult(anchored=False, moves=_rebuild(world, board, placement, previous))

    first_cell, second_cell = rng.choice(slots)
    placement: Dict[Position, int] = {first_cell: anchor[0], second_cell: anchor[1]}
    remainder = [tile for tile in tiles if tile not in anchor]
    local_biased_shuffle(remainder, rng)
    free_cells = [pos for pos in board.positions() if pos not in placement]
    for pos, tile in zip(free_cells, remainder):
        placement[pos] = tile
    return ReshuffleResult(
        anchored=True,
        moves=_rebuild(world, board, placement, previous),
        anchor_cells=(first_cell, second_cell),
    )
