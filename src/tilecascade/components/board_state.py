from dataclasses import dataclass
from enum import Enum, auto


class BoardPhase(Enum):
    """Steps of the activation pipeline; only IDLE accepts new activations."""
    IDLE = auto()
    GROUP_SELECTED = auto()
    CLEARING = auto()
    CASCADING = auto()
    REFILLING = auto()
    CLASSIFYING = auto()
    DEADLOCK_BREAKING = auto()


@dataclass(slots=True)
class BoardState:
    """Singleton component tracking the controller's phase and counters."""

    phase: BoardPhase = BoardPhase.IDLE
    moves: int = 0
    reshuffles: int = 0
    deadlocked: bool = False
