import itertools
import random

from tapblock.components.board import Board
from tapblock.components.game_state import GameMode, GameState
from tapblock.constants import KEY_ENTER, KEY_ESCAPE, MOUSE_BUTTON_LEFT
from tapblock.events.bus import (
    EVENT_CELL_TAP,
    EVENT_GAME_MODE_CHANGED,
    EVENT_GAME_OVER,
    EVENT_KEY_PRESS,
    EVENT_MENU_CONTINUE_SELECTED,
    EVENT_MENU_REQUESTED,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_SESSION_STARTED,
    EventBus,
)
from tapblock.menu.components import MenuAction, MenuButton, MenuTag
from tapblock.menu.factory import spawn_main_menu
from tapblock.menu.input_system import MenuInputSystem
from tapblock.systems.board import BoardSystem
from tapblock.systems.game_flow_system import GameFlowSystem
from tapblock.systems.input import InputSystem
from tapblock.systems.viewport import ViewportSystem
from tapblock.utils.game_state import get_settings
from tapblock.world import create_world


def _setup():
    bus = EventBus()
    world = create_world(bus, initial_mode=GameMode.MENU, rng=random.Random(5))
    flow = GameFlowSystem(world, bus, menu_size_provider=lambda: (800, 600))
    spawn_main_menu(world, 800, 600)
    MenuInputSystem(world, bus)
    board_system = BoardSystem(world, bus)
    ViewportSystem(world, bus, 800, 600)
    InputSystem(bus, world)
    return bus, world, flow, board_system


def _state(world) -> GameState:
    return next(comp for _, comp in world.get_component(GameState))


def _button(world, label=None, *, setting=None, delta=None) -> MenuButton:
    for _, button in world.get_component(MenuButton):
        if label is not None and button.label == label:
            return button
        if setting is not None and button.setting == setting and button.delta == delta:
            return button
    raise AssertionError(f"No menu button {label or (setting, delta)}")


_PRESS_IDS = itertools.count(100)


def _press(bus, button: MenuButton, press_id=None):
    # Presses carry ids the way the throttle system numbers them.
    if press_id is None:
        press_id = next(_PRESS_IDS)
    bus.emit(
        EVENT_MOUSE_PRESS,
        x=button.x,
        y=button.y,
        button=MOUSE_BUTTON_LEFT,
        press_id=press_id,
    )
    bus.emit(EVENT_MOUSE_RELEASE, x=button.x, y=button.y, button=MOUSE_BUTTON_LEFT)


def test_menu_is_spawned_with_steppers_and_buttons():
    _, world, _, _ = _setup()

    actions = [button.action for _, button in world.get_component(MenuButton)]

    assert actions.count(MenuAction.ADJUST) == 6
    assert _button(world, "New Game").enabled
    assert not _button(world, "Continue").enabled


def test_new_game_button_starts_session_with_settings():
    bus, world, _, board_system = _setup()
    sessions = []
    bus.subscribe(EVENT_SESSION_STARTED, lambda sender, **payload: sessions.append(payload))
    taps = []
    bus.subscribe(EVENT_CELL_TAP, lambda sender, **payload: taps.append(payload))

    _press(bus, _button(world, "New Game"), press_id=5)

    state = _state(world)
    assert state.mode == GameMode.PLAYING
    assert state.input_guard_press_id == 5
    assert sessions == [{"width": 10, "height": 16, "colors": 4}]
    assert board_system.board.grid.shape == (16, 10)
    assert not list(world.get_component(MenuTag))
    # The click that pressed New Game never reaches the board.
    assert not taps


def test_stepper_buttons_adjust_settings_within_range():
    bus, world, _, _ = _setup()
    _press(bus, _button(world, setting="width", delta=+1))
    _press(bus, _button(world, setting="colors", delta=-1))

    settings = get_settings(world)
    assert (settings.width, settings.height, settings.colors) == (11, 16, 3)
    assert _state(world).mode == GameMode.MENU

    settings.colors = 2
    _press(bus, _button(world, setting="colors", delta=-1))
    assert settings.colors == 2


def test_adjusted_settings_shape_the_next_board():
    bus, world, _, board_system = _setup()
    get_settings(world).width = 5
    get_settings(world).height = 7

    _press(bus, _button(world, "New Game"))

    assert board_system.board.grid.shape == (7, 5)


def test_enter_in_menu_starts_new_game():
    bus, world, _, board_system = _setup()

    bus.emit(EVENT_KEY_PRESS, symbol=KEY_ENTER, modifiers=0)

    assert _state(world).mode == GameMode.PLAYING
    assert board_system.board is not None


def test_escape_opens_menu_and_continue_resumes_same_board():
    bus, world, _, board_system = _setup()
    _press(bus, _button(world, "New Game"))
    entity = board_system.board_entity

    bus.emit(EVENT_KEY_PRESS, symbol=KEY_ESCAPE, modifiers=0)

    assert _state(world).mode == GameMode.MENU
    continue_button = _button(world, "Continue")
    assert continue_button.enabled

    _press(bus, continue_button)

    assert _state(world).mode == GameMode.PLAYING
    assert board_system.board_entity == entity
    assert len(list(world.get_component(Board))) == 1


def test_game_over_then_menu_disables_continue():
    bus, world, flow, board_system = _setup()
    _press(bus, _button(world, "New Game"))
    board = board_system.board

    bus.emit(EVENT_GAME_OVER, score=3, width=board.width, height=board.height, colors=board.colors)
    assert _state(world).mode == GameMode.GAME_OVER
    assert not flow.can_continue

    bus.emit(EVENT_MENU_REQUESTED, reason="game_over_click")

    assert _state(world).mode == GameMode.MENU
    continue_button = _button(world, "Continue")
    assert not continue_button.enabled
    _press(bus, continue_button)
    assert _state(world).mode == GameMode.MENU


def test_enter_on_game_over_deals_fresh_board():
    bus, world, _, board_system = _setup()
    _press(bus, _button(world, "New Game"))
    first_entity = board_system.board_entity
    bus.emit(EVENT_GAME_OVER, score=0, width=10, height=16, colors=4)

    bus.emit(EVENT_KEY_PRESS, symbol=KEY_ENTER, modifiers=0)

    assert _state(world).mode == GameMode.PLAYING
    assert board_system.board_entity != first_entity


def test_menu_request_while_in_menu_keeps_single_menu():
    bus, world, _, _ = _setup()
    modes = []
    bus.subscribe(EVENT_GAME_MODE_CHANGED, lambda sender, **payload: modes.append(payload))
    before = len(list(world.get_component(MenuTag)))

    bus.emit(EVENT_MENU_REQUESTED, reason="escape")

    assert len(list(world.get_component(MenuTag))) == before
    assert not modes


def test_continue_without_session_starts_new_game():
    bus, world, flow, board_system = _setup()
    assert not flow.can_continue

    bus.emit(EVENT_MENU_CONTINUE_SELECTED, press_id=None)

    assert _state(world).mode == GameMode.PLAYING
    assert board_system.board is not None
