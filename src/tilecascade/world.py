import random

from esper import World
from .events.bus import EventBus
from tilecascade.components.board_state import BoardState


def create_world(
    event_bus: EventBus,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create an ECS world with its random source and board state resource.

    The board entity itself is created by BoardSystem. ``world.random`` is the
    single random source used for fills, refills and shuffles; pass a seeded
    ``random.Random`` for deterministic runs.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register the shared board state resource.
    world.create_entity(BoardState())
    return world
