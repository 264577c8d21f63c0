from dataclasses import dataclass

@dataclass(slots=True)
class BoardPosition:
    """Target cell of a tile; presentation layers animate towards it."""
    row: int
    col: int
