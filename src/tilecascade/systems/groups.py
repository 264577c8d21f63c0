from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional

from esper import World

from tilecascade.components.board import Board, Position
from tilecascade.systems.board_ops import get_board, tile_color

Visited = List[List[bool]]

# Up, down, left, right.
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def new_visited(board: Board) -> Visited:
    return [[False] * board.cols for _ in range(board.rows)]


def find_group(world: World, row: int, col: int, visited: Optional[Visited] = None) -> List[int]:
    """Return the tiles 4-connected to (row, col) that share its color.

    Breadth-first with an explicit queue, so the result is in discovery order.
    A shared ``visited`` matrix lets callers sweep the board without revisiting
    cells; cells already marked are never added. An empty or out-of-bounds
    start yields an empty group.
    """
    board = get_board(world)
    if board is None:
        return []
    start = board.get(row, col)
    if start is None:
        return []
    if visited is None:
        visited = new_visited(board)
    if visited[row][col]:
        return []
    color = tile_color(world, start)

    group: List[int] = []
    queue: Deque[Position] = deque()
    visited[row][col] = True
    queue.append((row, col))
    while queue:
        r, c = queue.popleft()
        group.append(board.cells[r][c])
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = r + dr, c + dc
            if not board.in_bounds(nr, nc) or visited[nr][nc]:
                continue
            neighbor = board.cells[nr][nc]
            if neighbor is None or tile_color(world, neighbor) != color:
                continue
            visited[nr][nc] = True
            queue.append((nr, nc))
    return group


def classify_all_groups(world: World) -> Dict[int, int]:
    """Map every occupied tile to the size of the group it belongs to.

    Cells are swept row-major; singletons are recorded with size 1.
    """
    board = get_board(world)
    if board is None:
        return {}
    visited = new_visited(board)
    sizes: Dict[int, int] = {}
    for row, col, _ in board.occupied():
        if visited[row][col]:
            continue
        group = find_group(world, row, col, visited)
        for tile in group:
            sizes[tile] = len(group)
    return sizes
