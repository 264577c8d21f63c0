from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

Position = Tuple[int, int]


@dataclass(slots=True)
class Board:
    """Cell array of tile entity handles.

    ``cells[row][col]`` is the entity id of the tile occupying that cell, or
    None when the cell is empty. Row 0 is the top of the board.
    Out-of-bounds reads return None and out-of-bounds writes are ignored.
    """
    rows: int
    cols: int
    colors: int = 6
    cells: List[List[Optional[int]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[None] * self.cols for _ in range(self.rows)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Optional[int]:
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def set(self, row: int, col: int, tile: Optional[int]) -> bool:
        if not self.in_bounds(row, col):
            return False
        self.cells[row][col] = tile
        return True

    def positions(self) -> Iterator[Position]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    def occupied(self) -> List[Tuple[int, int, int]]:
        """Return ``(row, col, tile)`` for every occupied cell in row-major order."""
        return [
            (row, col, tile)
            for row, line in enumerate(self.cells)
            for col, tile in enumerate(line)
            if tile is not None
        ]

    def clear(self) -> None:
        for line in self.cells:
            for col in range(len(line)):
                line[col] = None
