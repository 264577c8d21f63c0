from dataclasses import dataclass
from enum import IntEnum


class Tier(IntEnum):
    """Icon bucket for a tile, derived from the size of its group."""
    DEFAULT = 0
    A = 1
    B = 2
    C = 3


@dataclass(slots=True)
class GroupTier:
    size: int = 1
    tier: Tier = Tier.DEFAULT
