from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button (board world coordinates)
EVENT_TILE_CLICK = "tile_click"            # payload: row, col
EVENT_ACTIVATION_REJECTED = "activation_rejected"  # payload: row, col, phase=BoardPhase


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_GROUP_FOUND = "group_found"                  # payload: row, col, tiles=list[int], positions=[(r,c),...], size=int
EVENT_GROUP_CLEARED = "group_cleared"              # payload: positions=[(r,c),...], color_index=int, size=int
EVENT_GRAVITY_APPLIED = "gravity_applied"          # payload: moves=[{'tile','from','to'}], passes=int
EVENT_REFILL_COMPLETED = "refill_completed"        # payload: new_tiles=[(r,c),...]
EVENT_BOARD_RESHUFFLED = "board_reshuffled"        # payload: anchored=bool, moves=[{'tile','from','to'}]
EVENT_BOARD_DEADLOCKED = "board_deadlocked"        # payload: reason=str
EVENT_BOARD_INITIALIZED = "board_initialized"      # payload: rows, cols, colors, thresholds=(a,b,c)
EVENT_PHASE_CHANGED = "phase_changed"              # payload: previous=BoardPhase, phase=BoardPhase


# ============================================================================
# PRESENTATION
# ============================================================================
EVENT_TIERS_UPDATED = "tiers_updated"      # payload: tiers=dict[int, Tier], positions=dict[int, (r,c)]


# ============================================================================
# CONFIGURATION
# ============================================================================
EVENT_SETTINGS_UPDATE = "settings_update"  # payload: rows, columns, colors, group_size_a, group_size_b, group_size_c
