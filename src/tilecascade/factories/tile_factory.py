"""Tile creation and retirement.

The board only needs "create a tile with color K" and "destroy tile T".
TileFactory allocates a fresh entity per tile; PooledTileFactory parks
retired entities per color and hands them out again.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, Dict

from esper import World

from tilecascade.components.active_switch import ActiveSwitch
from tilecascade.components.board_position import BoardPosition
from tilecascade.components.group_tier import GroupTier
from tilecascade.components.tile import TileColor


class TileFactory:
    def __init__(self, world: World):
        self.world = world

    def create(self, color_index: int, row: int, col: int) -> int:
        return self.world.create_entity(
            TileColor(color_index=color_index),
            BoardPosition(row=row, col=col),
            GroupTier(),
            ActiveSwitch(active=True),
        )

    def destroy(self, tile: int) -> None:
        self.world.delete_entity(tile, immediate=True)


class PooledTileFactory(TileFactory):
    """Reuses retired tile entities, keyed by color like a per-prefab pool."""

    def __init__(self, world: World):
        super().__init__(world)
        self._pools: Dict[int, Deque[int]] = {}

    def create(self, color_index: int, row: int, col: int) -> int:
        pool = self._pools.get(color_index)
        if not pool:
            return super().create(color_index, row, col)
        tile = pool.popleft()
        self.world.add_component(tile, BoardPosition(row=row, col=col))
        self.world.add_component(tile, GroupTier())
        self.world.component_for_entity(tile, ActiveSwitch).active = True
        return tile

    def destroy(self, tile: int) -> None:
        color = self.world.component_for_entity(tile, TileColor)
        self.world.component_for_entity(tile, ActiveSwitch).active = False
        if self.world.has_component(tile, BoardPosition):
            self.world.remove_component(tile, BoardPosition)
        self._pools.setdefault(color.color_index, deque()).append(tile)

    def pooled(self, color_index: int | None = None) -> int:
        """Number of parked tiles, optionally for a single color."""
        if color_index is not None:
            return len(self._pools.get(color_index, ()))
        return sum(len(pool) for pool in self._pools.values())
