import logging
from typing import Dict, List, Optional, Sequence, Tuple, Union

from esper import World

from tilecascade.components.board import Board
from tilecascade.components.board_state import BoardPhase
from tilecascade.components.group_tier import GroupTier, Tier
from tilecascade.components.thresholds import GroupSizeThresholds
from tilecascade.config import BoardSettings
from tilecascade.constants import CASCADE_PASSES, DEFAULT_COLORS, DEFAULT_COLS, DEFAULT_ROWS, MIN_CLEARABLE_GROUP
from tilecascade.events.bus import (
    EventBus,
    EVENT_ACTIVATION_REJECTED,
    EVENT_BOARD_DEADLOCKED,
    EVENT_BOARD_INITIALIZED,
    EVENT_BOARD_RESHUFFLED,
    EVENT_GRAVITY_APPLIED,
    EVENT_GROUP_CLEARED,
    EVENT_GROUP_FOUND,
    EVENT_PHASE_CHANGED,
    EVENT_REFILL_COMPLETED,
    EVENT_SETTINGS_UPDATE,
    EVENT_TIERS_UPDATED,
    EVENT_TILE_CLICK,
)
from tilecascade.factories.tile_factory import TileFactory
from tilecascade.systems.board_ops import (
    color_grid,
    get_board,
    get_or_create_board_state,
    get_random,
    place_tile,
    tile_color,
    tile_positions,
)
from tilecascade.systems.cascade import cascade, refill
from tilecascade.systems.deadlock import has_any_move
from tilecascade.systems.groups import find_group
from tilecascade.systems.reshuffle import reshuffle
from tilecascade.systems.tiers import update_group_tiers

logger = logging.getLogger(__name__)

ThresholdsInput = Union[GroupSizeThresholds, Sequence[int], None]


class BoardSystem:
    """Owns the board entity and runs the activation pipeline.

    A click on a group of two or more same-colored tiles clears it, lets the
    columns fall (two gravity passes), refills the gaps, reclassifies groups and
    reshuffles when no move is left. Every step runs synchronously inside the
    click handler; presentation layers follow along through bus events.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        colors: int = DEFAULT_COLORS,
        thresholds: ThresholdsInput = None,
        *,
        factory: Optional[TileFactory] = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.factory = factory or TileFactory(world)
        self.board_entity = self.world.create_entity()
        self._pending_settings: Optional[BoardSettings] = None
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_SETTINGS_UPDATE, self.on_settings_update)
        self.initialize(rows, cols, colors, thresholds)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def initialize(self, rows: int, columns: int, colors: int, thresholds: ThresholdsInput = None) -> None:
        if isinstance(thresholds, GroupSizeThresholds):
            thresholds = thresholds.as_tuple()
        values = list(thresholds)[:3] if thresholds is not None else []
        a, b, c = values + [None] * (3 - len(values))
        settings = BoardSettings.from_values(rows, columns, colors, a, b, c)
        self._apply_settings(settings)

    def update_settings(
        self,
        rows=None,
        columns=None,
        colors=None,
        group_size_a=None,
        group_size_b=None,
        group_size_c=None,
    ) -> None:
        """Replace the configuration and rebuild the board from scratch."""
        settings = BoardSettings.from_values(rows, columns, colors, group_size_a, group_size_b, group_size_c)
        self._apply_settings(settings)

    def on_settings_update(self, sender, **kwargs):
        self.update_settings(
            rows=kwargs.get('rows'),
            columns=kwargs.get('columns'),
            colors=kwargs.get('colors'),
            group_size_a=kwargs.get('group_size_a'),
            group_size_b=kwargs.get('group_size_b'),
            group_size_c=kwargs.get('group_size_c'),
        )

    def _apply_settings(self, settings: BoardSettings) -> None:
        state = get_or_create_board_state(self.world)
        if state.phase != BoardPhase.IDLE:
            # Rebuilding mid-pipeline would pull the board out from under it.
            self._pending_settings = settings
            return
        self._destroy_all_tiles()
        board = Board(rows=settings.rows, cols=settings.columns, colors=settings.colors)
        self.world.add_component(self.board_entity, board)
        self.world.add_component(self.board_entity, settings.thresholds)
        rng = get_random(self.world)
        for row, col in board.positions():
            tile = self.factory.create(rng.randrange(board.colors), row, col)
            place_tile(self.world, board, row, col, tile)
        state.deadlocked = False
        logger.debug("Board initialized: %sx%s, %s colors, thresholds %s",
                     board.rows, board.cols, board.colors, settings.thresholds.as_tuple())
        self._settle()
        self.event_bus.emit(
            EVENT_BOARD_INITIALIZED,
            rows=board.rows,
            cols=board.cols,
            colors=board.colors,
            thresholds=settings.thresholds.as_tuple(),
        )

    def _destroy_all_tiles(self) -> None:
        board = self.board
        if board is None:
            return
        for _, _, tile in board.occupied():
            self.factory.destroy(tile)
        board.clear()

    # ------------------------------------------------------------------
    # Activation pipeline
    # ------------------------------------------------------------------
    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        self.on_cell_activated(row, col)

    def on_cell_activated(self, row: int, col: int) -> bool:
        """Clear the group at (row, col) if it has two or more tiles.

        Returns True when a group was cleared. Out-of-bounds cells, empty cells,
        lone tiles and activations arriving mid-pipeline leave the board untouched.
        """
        state = get_or_create_board_state(self.world)
        if state.phase != BoardPhase.IDLE:
            self.event_bus.emit(EVENT_ACTIVATION_REJECTED, row=row, col=col, phase=state.phase)
            return False
        board = self.board
        if board is None or board.get(row, col) is None:
            return False

        self._set_phase(BoardPhase.GROUP_SELECTED)
        try:
            group = find_group(self.world, row, col)
            if len(group) < MIN_CLEARABLE_GROUP:
                self._set_phase(BoardPhase.IDLE)
                return False
            positions = tile_positions(self.world)
            group_cells = [positions[tile] for tile in group]
            color_index = tile_color(self.world, group[0])
            self.event_bus.emit(EVENT_GROUP_FOUND, row=row, col=col, tiles=list(group),
                                positions=group_cells, size=len(group))

            self._set_phase(BoardPhase.CLEARING)
            for tile, (r, c) in zip(group, group_cells):
                board.set(r, c, None)
                self.factory.destroy(tile)
            state.moves += 1
            logger.debug("Cleared group of %d (color %s) at %s", len(group), color_index, (row, col))
            self.event_bus.emit(EVENT_GROUP_CLEARED, positions=sorted(group_cells),
                                color_index=color_index, size=len(group))

            self._set_phase(BoardPhase.CASCADING)
            moves = []
            for _ in range(CASCADE_PASSES):
                moves.extend(cascade(self.world))
            self.event_bus.emit(EVENT_GRAVITY_APPLIED, moves=[move.as_payload() for move in moves],
                                passes=CASCADE_PASSES)

            self._set_phase(BoardPhase.REFILLING)
            new_tiles = refill(self.world, self.factory, get_random(self.world))
            self.event_bus.emit(EVENT_REFILL_COMPLETED, new_tiles=new_tiles)

            self._settle()
        finally:
            if state.phase != BoardPhase.IDLE:
                self._recover()
        return True

    def _settle(self) -> None:
        """Classify, break a deadlock if there is one, and return to IDLE."""
        state = get_or_create_board_state(self.world)
        try:
            self._set_phase(BoardPhase.CLASSIFYING)
            self._publish_tiers()
            if has_any_move(self.world):
                state.deadlocked = False
            else:
                self._set_phase(BoardPhase.DEADLOCK_BREAKING)
                result = reshuffle(self.world, get_random(self.world))
                state.reshuffles += 1
                self.event_bus.emit(EVENT_BOARD_RESHUFFLED, anchored=result.anchored,
                                    moves=[move.as_payload() for move in result.moves])
                self._set_phase(BoardPhase.CLASSIFYING)
                self._publish_tiers()
                state.deadlocked = not has_any_move(self.world)
                if state.deadlocked:
                    logger.warning("Board still deadlocked after reshuffle fallback; reinitialize to recover")
                    self.event_bus.emit(EVENT_BOARD_DEADLOCKED, reason="reshuffle_fallback")
            self._set_phase(BoardPhase.IDLE)
        finally:
            if state.phase != BoardPhase.IDLE:
                self._recover()

    def _recover(self) -> None:
        """Bring the board back to a full, classified IDLE state without emitting.

        Runs when a subscriber raised mid-pipeline; the exception still reaches
        the caller once this returns.
        """
        state = get_or_create_board_state(self.world)
        logger.warning("Pipeline interrupted in phase %s; completing board silently", state.phase.name)
        board = self.board
        if board is not None:
            if any(board.get(r, c) is None for r, c in board.positions()):
                for _ in range(CASCADE_PASSES):
                    cascade(self.world)
                refill(self.world, self.factory, get_random(self.world))
            if not has_any_move(self.world):
                reshuffle(self.world, get_random(self.world))
                state.reshuffles += 1
            update_group_tiers(self.world)
            state.deadlocked = not has_any_move(self.world)
        state.phase = BoardPhase.IDLE
        if self._pending_settings is not None:
            pending, self._pending_settings = self._pending_settings, None
            self._apply_settings(pending)

    def _publish_tiers(self) -> None:
        tiers = update_group_tiers(self.world)
        self.event_bus.emit(EVENT_TIERS_UPDATED, tiers=tiers, positions=tile_positions(self.world))

    def _set_phase(self, phase: BoardPhase) -> None:
        state = get_or_create_board_state(self.world)
        previous = state.phase
        if previous == phase:
            return
        state.phase = phase
        self.event_bus.emit(EVENT_PHASE_CHANGED, previous=previous, phase=phase)
        if phase == BoardPhase.IDLE and self._pending_settings is not None:
            pending, self._pending_settings = self._pending_settings, None
            self._apply_settings(pending)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def board(self) -> Optional[Board]:
        return get_board(self.world)

    @property
    def thresholds(self) -> GroupSizeThresholds:
        return self.world.component_for_entity(self.board_entity, GroupSizeThresholds)

    def has_any_move(self) -> bool:
        return has_any_move(self.world)

    def snapshot(self) -> List[List[Optional[int]]]:
        return color_grid(self.world)

    def tier_at(self, row: int, col: int) -> Optional[Tier]:
        board = self.board
        tile = board.get(row, col) if board is not None else None
        if tile is None:
            return None
        return self.world.component_for_entity(tile, GroupTier).tier

    def tiers(self) -> Dict[Tuple[int, int], Tier]:
        board = self.board
        if board is None:
            return {}
        return {
            (row, col): self.world.component_for_entity(tile, GroupTier).tier
            for row, col, tile in board.occupied()
        }
