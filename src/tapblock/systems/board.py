import logging
from typing import Optional, Tuple

from esper import World

from tapblock.components.board import Board
from tapblock.components.game_state import GameMode
from tapblock.events.bus import (
    EventBus,
    EVENT_BOARD_CREATED,
    EVENT_CELL_HOVER,
    EVENT_CELL_TAP,
    EVENT_GAME_MODE_CHANGED,
    EVENT_GAME_OVER,
    EVENT_POINTER_LEFT,
    EVENT_SESSION_STARTED,
)
from tapblock.systems import board_ops
from tapblock.utils.game_state import current_mode

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the session board and turns board-space pointer events into marks and clears."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.board_entity: Optional[int] = None
        self.event_bus.subscribe(EVENT_SESSION_STARTED, self.on_session_started)
        self.event_bus.subscribe(EVENT_CELL_HOVER, self.on_cell_hover)
        self.event_bus.subscribe(EVENT_CELL_TAP, self.on_cell_tap)
        self.event_bus.subscribe(EVENT_POINTER_LEFT, self.on_pointer_left)
        self.event_bus.subscribe(EVENT_GAME_MODE_CHANGED, self.on_game_mode_changed)

    @property
    def board(self) -> Optional[Board]:
        if self.board_entity is None:
            return None
        try:
            return self.world.component_for_entity(self.board_entity, Board)
        except KeyError:
            return None

    def start_session(self, width: int, height: int, colors: int) -> Board:
        """Discard the previous board and deal a fresh random one."""
        board = board_ops.create_board(width, height, colors, rng=getattr(self.world, "random", None))
        if self.board_entity is not None and self.world.entity_exists(self.board_entity):
            self.world.delete_entity(self.board_entity, immediate=True)
        self.board_entity = self.world.create_entity(board)
        logger.info("New %dx%d board with %d colors", width, height, colors)
        self.event_bus.emit(
            EVENT_BOARD_CREATED,
            entity=self.board_entity,
            width=width,
            height=height,
            colors=colors,
        )
        if board_ops.is_done(board):
            self._emit_game_over(board)
        return board

    def on_session_started(self, sender, **kwargs):
        width = kwargs.get('width')
        height = kwargs.get('height')
        colors = kwargs.get('colors')
        if width is None or height is None or colors is None:
            return
        self.start_session(int(width), int(height), int(colors))

    def on_cell_hover(self, sender, **kwargs):
        point = self._point(kwargs)
        board = self.board
        if point is None or board is None:
            return
        if current_mode(self.world) != GameMode.PLAYING:
            return
        board_ops.highlight(board, *point)

    def on_cell_tap(self, sender, **kwargs):
        point = self._point(kwargs)
        board = self.board
        if point is None or board is None:
            return
        if current_mode(self.world) != GameMode.PLAYING:
            return
        removed = board_ops.clear(board, *point)
        if not removed:
            return
        logger.debug("Cleared %d blocks, %d left", len(removed), board_ops.blocks_left(board))
        # Whatever fell under the pointer becomes the new preview.
        board_ops.highlight(board, *point)
        if board_ops.is_done(board):
            board.marked.fill(False)
            self._emit_game_over(board)

    def on_pointer_left(self, sender, **kwargs):
        board = self.board
        if board is None:
            return
        board_ops.mark(board, -1, -1)

    def on_game_mode_changed(self, sender, **kwargs):
        # The preview only means something while the board takes taps.
        board = self.board
        if board is not None and kwargs.get("new_mode") != GameMode.PLAYING:
            board.marked.fill(False)

    def _emit_game_over(self, board: Board) -> None:
        score = board_ops.score(board)
        logger.info("Game over with %d blocks left", score)
        self.event_bus.emit(
            EVENT_GAME_OVER,
            score=score,
            width=board.width,
            height=board.height,
            colors=board.colors,
        )

    @staticmethod
    def _point(payload) -> Optional[Tuple[float, float]]:
        x = payload.get('x')
        y = payload.get('y')
        if x is None or y is None:
            return None
        try:
            return float(x), float(y)
        except (TypeError, ValueError):
            return None
