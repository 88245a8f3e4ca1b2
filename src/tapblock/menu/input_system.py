"""Input handling for the ECS-driven main menu."""
from esper import World

from tapblock.components.game_state import GameMode
from tapblock.constants import KEY_ENTER, KEY_RETURN
from tapblock.events.bus import (
    EVENT_KEY_PRESS,
    EVENT_MENU_CONTINUE_SELECTED,
    EVENT_MENU_NEW_GAME_SELECTED,
    EVENT_MOUSE_PRESS,
    EventBus,
)
from tapblock.menu.components import MenuAction, MenuButton
from tapblock.menu.factory import clear_main_menu
from tapblock.utils.game_state import current_mode, get_settings


class MenuInputSystem:
    """Processes input events while the game is in the menu mode."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self._event_bus = event_bus
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return
        press_id = payload.get("press_id")
        try:
            press_id_int = int(press_id) if press_id is not None else None
        except (TypeError, ValueError):
            press_id_int = None
        self.handle_mouse_press(float(x), float(y), int(button), press_id_int)

    def on_key_press(self, sender, **payload) -> None:
        symbol = payload.get("symbol")
        if symbol is None:
            return
        self.handle_key_press(int(symbol), int(payload.get("modifiers") or 0))

    def handle_mouse_press(
        self,
        x: float,
        y: float,
        button: int,
        press_id: int | None = None,
    ) -> None:
        """Activate the enabled button under the pointer, if any."""
        if current_mode(self.world) != GameMode.MENU:
            return

        for _, menu_button in self.world.get_component(MenuButton):
            if not menu_button.enabled:
                continue
            if self._point_inside_button(x, y, menu_button):
                self._activate(menu_button, press_id=press_id)
                return

    def handle_key_press(self, symbol: int, modifiers: int) -> None:
        """Enter starts a new game."""
        if current_mode(self.world) != GameMode.MENU:
            return
        if symbol in (KEY_ENTER, KEY_RETURN):
            self._select(EVENT_MENU_NEW_GAME_SELECTED)

    def _activate(self, button: MenuButton, *, press_id: int | None = None) -> None:
        if button.action == MenuAction.NEW_GAME:
            self._select(EVENT_MENU_NEW_GAME_SELECTED, press_id=press_id)
        elif button.action == MenuAction.CONTINUE:
            self._select(EVENT_MENU_CONTINUE_SELECTED, press_id=press_id)
        elif button.action == MenuAction.ADJUST and button.setting:
            get_settings(self.world).adjust(button.setting, button.delta)

    def _select(self, name: str, *, press_id: int | None = None) -> None:
        clear_main_menu(self.world)
        self._event_bus.emit(name, press_id=press_id)

    @staticmethod
    def _point_inside_button(x: float, y: float, button: MenuButton) -> bool:
        half_w = button.width / 2
        half_h = button.height / 2
        return (
            button.x - half_w <= x <= button.x + half_w
            and button.y - half_h <= y <= button.y + half_h
        )
