from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

from esper import World

from tilecascade.components.tile import TileColor
from tilecascade.events.bus import EventBus
from tilecascade.factories.tile_factory import TileFactory
from tilecascade.systems.board import BoardSystem
from tilecascade.systems.board_ops import get_board, place_tile
from tilecascade.world import create_world


class ScriptedRandom(random.Random):
    """Random source whose single-argument ``randrange`` calls replay a script.

    Once the script runs out (or for two-argument calls such as ``randint``)
    it behaves like a regular seeded ``random.Random``.
    """

    def __init__(self, script: Sequence[int] = (), seed: int = 0):
        super().__init__(seed)
        self.script: List[int] = list(script)

    def randrange(self, start, stop=None, step=1):
        if stop is None and self.script:
            return self.script.pop(0)
        return super().randrange(start, stop, step)


def build_board(
    rows: int = 3,
    cols: int = 3,
    colors: int = 6,
    thresholds: Tuple[int, int, int] = (2, 3, 5),
    *,
    seed: int = 1234,
    rng: Optional[random.Random] = None,
    factory_cls=TileFactory,
) -> Tuple[EventBus, World, BoardSystem]:
    bus = EventBus()
    world = create_world(bus, rng=rng or random.Random(seed))
    board = BoardSystem(world, bus, rows, cols, colors, thresholds, factory=factory_cls(world))
    return bus, world, board


def set_board_colors(board_system: BoardSystem, layout: Sequence[Sequence[Optional[int]]]) -> None:
    """Overwrite the board with a hand-built color layout (None = empty cell)."""
    world = board_system.world
    board = get_board(world)
    assert board is not None
    assert len(layout) == board.rows and all(len(line) == board.cols for line in layout)
    for row, line in enumerate(layout):
        for col, color in enumerate(line):
            tile = board.get(row, col)
            if color is None:
                if tile is not None:
                    board_system.factory.destroy(tile)
                    board.set(row, col, None)
                continue
            if tile is None:
                tile = board_system.factory.create(color, row, col)
                place_tile(world, board, row, col, tile)
            else:
                world.component_for_entity(tile, TileColor).color_index = color
