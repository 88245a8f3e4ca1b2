"""High-level coordinator for game mode transitions."""
from __future__ import annotations

import logging
from typing import Callable, Tuple

from esper import World

from tapblock.components.game_state import GameMode
from tapblock.events.bus import (
    EVENT_GAME_OVER,
    EVENT_MENU_CONTINUE_SELECTED,
    EVENT_MENU_NEW_GAME_SELECTED,
    EVENT_MENU_REQUESTED,
    EVENT_SESSION_STARTED,
    EventBus,
)
from tapblock.menu.factory import clear_main_menu, spawn_main_menu
from tapblock.systems.board_ops import get_board
from tapblock.utils.game_state import current_mode, get_settings, set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Central coordinator for the menu, play and game-over sequencing."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        menu_size_provider: Callable[[], Tuple[int, int]] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._menu_size_provider = menu_size_provider
        self._session_finished = False

        self.event_bus.subscribe(EVENT_MENU_NEW_GAME_SELECTED, self._on_new_game)
        self.event_bus.subscribe(EVENT_MENU_CONTINUE_SELECTED, self._on_continue_game)
        self.event_bus.subscribe(EVENT_MENU_REQUESTED, self._on_menu_requested)
        self.event_bus.subscribe(EVENT_GAME_OVER, self._on_game_over)

    @property
    def can_continue(self) -> bool:
        """True while a session exists that has not reached game over."""
        return get_board(self.world) is not None and not self._session_finished

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_new_game(self, sender, **payload) -> None:
        clear_main_menu(self.world)
        settings = get_settings(self.world)
        self._session_finished = False
        # Switch first: a dealt board with no moves ends the game immediately.
        set_game_mode(
            self.world,
            self.event_bus,
            GameMode.PLAYING,
            input_guard_press_id=payload.get("press_id"),
        )
        logger.debug("Starting session %s", settings.as_dict())
        self.event_bus.emit(EVENT_SESSION_STARTED, **settings.as_dict())

    def _on_continue_game(self, sender, **payload) -> None:
        clear_main_menu(self.world)
        if not self.can_continue:
            self._on_new_game(sender, **payload)
            return
        set_game_mode(
            self.world,
            self.event_bus,
            GameMode.PLAYING,
            input_guard_press_id=payload.get("press_id"),
        )

    def _on_game_over(self, sender, **payload) -> None:
        self._session_finished = True
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)

    def _on_menu_requested(self, sender, **payload) -> None:
        if current_mode(self.world) == GameMode.MENU:
            return
        self.open_menu()

    def open_menu(self) -> None:
        clear_main_menu(self.world)
        width, height = self._menu_size()
        spawn_main_menu(self.world, width, height, enable_continue=self.can_continue)
        set_game_mode(self.world, self.event_bus, GameMode.MENU)

    def _menu_size(self) -> Tuple[int, int]:
        if self._menu_size_provider is not None:
            return self._menu_size_provider()
        from tapblock.constants import WINDOW_HEIGHT, WINDOW_WIDTH

        return WINDOW_WIDTH, WINDOW_HEIGHT
