from esper import World

from tapblock.components.game_state import GameMode
from tapblock.constants import KEY_ENTER, KEY_ESCAPE, KEY_RETURN, MOUSE_BUTTON_LEFT
from tapblock.events.bus import (
    EventBus,
    EVENT_CELL_HOVER,
    EVENT_CELL_TAP,
    EVENT_KEY_PRESS,
    EVENT_MENU_NEW_GAME_SELECTED,
    EVENT_MENU_REQUESTED,
    EVENT_MOUSE_LEAVE,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_POINTER_LEFT,
)
from tapblock.systems.viewport import get_board_view
from tapblock.utils.affine import apply
from tapblock.utils.game_state import current_mode, get_game_state


class InputSystem:
    """Maps window pointer events onto the board through the cached inverse transform.

    Window coordinates are y-up; screen space (what the board transform
    targets) is y-down from the top-left corner, so y is flipped here first.
    """

    def __init__(self, event_bus: EventBus, world: World):
        self.event_bus = event_bus
        self.world = world
        # Mode in which the current left press started; a release only counts in the same mode.
        self._armed_mode: GameMode | None = None
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_MOUSE_LEAVE, self.on_mouse_leave)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def to_board_space(self, x: float, y: float):
        """Return unfloored board coordinates for a window point, or None without a board view."""
        view = get_board_view(self.world)
        if view is None:
            return None
        screen_x = float(x)
        # Pixel row y covers [y, y + 1) upwards; flip its centre so it lands in the row drawn over it.
        screen_y = view.viewport_height - (float(y) + 0.5)
        return apply(view.inverse, screen_x, screen_y)

    def on_mouse_move(self, sender, **kwargs):
        if current_mode(self.world) != GameMode.PLAYING:
            return
        point = self._board_point(kwargs)
        if point is None:
            return
        self.event_bus.emit(EVENT_CELL_HOVER, x=point[0], y=point[1])

    def on_mouse_leave(self, sender, **kwargs):
        if current_mode(self.world) != GameMode.PLAYING:
            return
        self.event_bus.emit(EVENT_POINTER_LEFT)

    def on_mouse_press(self, sender, **kwargs):
        if kwargs.get('button') != MOUSE_BUTTON_LEFT:
            return
        state = get_game_state(self.world)
        if state is None:
            return
        press_id = kwargs.get('press_id')
        if press_id is not None and press_id == state.input_guard_press_id:
            # This click already switched modes (e.g. the menu's New Game button).
            self._armed_mode = None
            return
        mode = state.mode
        if mode in (GameMode.PLAYING, GameMode.GAME_OVER):
            self._armed_mode = mode
        else:
            self._armed_mode = None

    def on_mouse_release(self, sender, **kwargs):
        if kwargs.get('button') != MOUSE_BUTTON_LEFT:
            return
        armed = self._armed_mode
        self._armed_mode = None
        mode = current_mode(self.world)
        if armed is None or armed != mode:
            return
        if mode == GameMode.GAME_OVER:
            self.event_bus.emit(EVENT_MENU_REQUESTED, reason="game_over_click")
            return
        point = self._board_point(kwargs)
        if point is None:
            return
        self.event_bus.emit(EVENT_CELL_TAP, x=point[0], y=point[1])

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        mode = current_mode(self.world)
        if symbol == KEY_ESCAPE and mode in (GameMode.PLAYING, GameMode.GAME_OVER):
            self.event_bus.emit(EVENT_MENU_REQUESTED, reason="escape")
        elif symbol in (KEY_ENTER, KEY_RETURN) and mode == GameMode.GAME_OVER:
            self.event_bus.emit(EVENT_MENU_NEW_GAME_SELECTED, press_id=None)

    def _board_point(self, payload):
        x = payload.get('x')
        y = payload.get('y')
        if x is None or y is None:
            return None
        try:
            return self.to_board_space(float(x), float(y))
        except (TypeError, ValueError):
            return None
