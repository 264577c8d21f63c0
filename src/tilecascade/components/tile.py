from dataclasses import dataclass

@dataclass(slots=True)
class TileColor:
    """Per-tile color assignment.

    color_index is the only property compared when grouping tiles.
    Position lives in BoardPosition; pooled/parked state in ActiveSwitch.
    """
    color_index: int
