from __future__ import annotations

from esper import World

from tapblock.components.board_view import BoardView
from tapblock.events.bus import (
    EVENT_BOARD_CREATED,
    EVENT_VIEWPORT_RESIZED,
    EventBus,
)
from tapblock.systems.board_ops import get_board
from tapblock.ui.layout import compute_board_transform
from tapblock.utils.affine import invert


class ViewportSystem:
    """Keeps the board's forward transform and its cached inverse in step with the window."""

    def __init__(self, world: World, event_bus: EventBus, width: float, height: float) -> None:
        self.world = world
        self.event_bus = event_bus
        self.viewport_width = float(width)
        self.viewport_height = float(height)
        self.event_bus.subscribe(EVENT_VIEWPORT_RESIZED, self._on_viewport_resized)
        self.event_bus.subscribe(EVENT_BOARD_CREATED, self._on_board_created)

    def _on_viewport_resized(self, sender, **payload) -> None:
        try:
            width = float(payload["width"])
            height = float(payload["height"])
        except (KeyError, TypeError, ValueError):
            return
        self.viewport_width = width
        self.viewport_height = height
        self.refresh()

    def _on_board_created(self, sender, **payload) -> None:
        self.refresh()

    def refresh(self) -> BoardView | None:
        """Recompute the fit for the current board; None when there is nothing to fit."""
        entry = get_board(self.world)
        if entry is None:
            return None
        if self.viewport_width <= 0 or self.viewport_height <= 0:
            # Minimised window: keep the last usable fit.
            return None
        entity, board = entry
        forward = compute_board_transform(
            self.viewport_width,
            self.viewport_height,
            board.width,
            board.height,
        )
        view = BoardView(
            forward=forward,
            inverse=invert(forward),
            viewport_width=self.viewport_width,
            viewport_height=self.viewport_height,
        )
        self.world.add_component(entity, view)
        return view


def get_board_view(world: World) -> BoardView | None:
    for _, view in world.get_component(BoardView):
        return view
    return None
