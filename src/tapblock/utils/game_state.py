from __future__ import annotations

from esper import World

from tapblock.components.game_state import GameMode, GameState
from tapblock.components.settings import GameSettings
from tapblock.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def _sanitize_press_id(value: int | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None


def current_mode(world: World) -> GameMode | None:
    state = get_game_state(world)
    return state.mode if state is not None else None


def get_settings(world: World) -> GameSettings:
    for _, settings in world.get_component(GameSettings):
        return settings
    settings = GameSettings()
    world.create_entity(settings)
    return settings


def set_game_mode(
    world: World,
    event_bus: EventBus,
    mode: GameMode,
    *,
    input_guard_press_id: int | None = None,
) -> None:
    """Update the global game mode and emit a change event when it differs."""

    guard_id = _sanitize_press_id(input_guard_press_id)
    state = get_game_state(world)
    if state is None:
        world.create_entity(GameState(mode=mode, input_guard_press_id=guard_id))
        event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=None, new_mode=mode)
        return
    previous_mode = state.mode
    state.input_guard_press_id = guard_id
    if previous_mode == mode:
        return
    state.mode = mode
    event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=previous_mode, new_mode=mode)
