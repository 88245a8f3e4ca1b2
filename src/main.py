"""Entry point for the TapBlock puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color
from tapblock.world import create_world
from tapblock.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from tapblock.events.bus import (
    EventBus,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_LEAVE,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS_RAW,
    EVENT_MOUSE_RELEASE_RAW,
    EVENT_VIEWPORT_RESIZED,
)
from tapblock.components.game_state import GameMode
from tapblock.menu.factory import spawn_main_menu
from tapblock.menu.input_system import MenuInputSystem
from tapblock.menu.render_system import MenuRenderSystem
from tapblock.rendering.palette import background_color
from tapblock.systems.board import BoardSystem
from tapblock.systems.game_flow_system import GameFlowSystem
from tapblock.systems.input import InputSystem
from tapblock.systems.mouse_throttle_system import MouseThrottleSystem
from tapblock.systems.render import RenderSystem
from tapblock.systems.session_log_system import SessionLogSystem
from tapblock.systems.viewport import ViewportSystem
from tapblock.utils.game_state import current_mode


class TapBlockWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.mouse_throttle_system = MouseThrottleSystem(self.event_bus)
        self.world = create_world(self.event_bus, initial_mode=GameMode.MENU)

        self.session_log_system = SessionLogSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(
            self.world,
            self.event_bus,
            menu_size_provider=lambda: (self.width, self.height),
        )
        spawn_main_menu(self.world, self.width, self.height)

        # Menu systems
        self.menu_input_system = MenuInputSystem(self.world, self.event_bus)
        self.menu_render_system = MenuRenderSystem(self.world, self)

        # Board systems
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.viewport_system = ViewportSystem(self.world, self.event_bus, self.width, self.height)
        self.input_system = InputSystem(self.event_bus, self.world)
        self.render_system = RenderSystem(
            self.world,
            self.event_bus,
            self,
            session_log=self.session_log_system,
        )

        set_background_color(background_color())

    def on_resize(self, width: int, height: int):
        if not hasattr(self, "game_flow_system"):
            return super().on_resize(width, height)
        self.event_bus.emit(EVENT_VIEWPORT_RESIZED, width=width, height=height)
        if current_mode(self.world) == GameMode.MENU:
            # Re-centre the menu for the new size.
            self.game_flow_system.open_menu()
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        if current_mode(self.world) == GameMode.MENU:
            self.menu_render_system.process()
            return
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS_RAW, x=x, y=y, button=button, modifiers=modifiers)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE_RAW, x=x, y=y, button=button, modifiers=modifiers)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_leave(self, x: float, y: float):
        self.event_bus.emit(EVENT_MOUSE_LEAVE, x=x, y=y)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    TapBlockWindow()
    run()

if __name__ == "__main__":
    main()
