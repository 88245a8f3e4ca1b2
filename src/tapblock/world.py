import random

from esper import World
from tapblock.events.bus import EventBus
from tapblock.components.game_state import GameState, GameMode
from tapblock.components.settings import GameSettings


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.MENU,
    *,
    settings: GameSettings | None = None,
    rng: random.Random | None = None,
) -> World:
    """Build the session context: game state and board settings live as components.

    ``world.random`` drives board generation; pass a seeded ``random.Random``
    for reproducible boards.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    world.create_entity(GameState(mode=initial_mode))
    world.create_entity(settings or GameSettings())
    return world
