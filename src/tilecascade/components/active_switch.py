from dataclasses import dataclass

@dataclass(slots=True)
class ActiveSwitch:
    """Per-tile liveness flag.

    active: True while the tile sits on the board; False while parked in a pool.
    """
    active: bool = True
