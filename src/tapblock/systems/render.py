from esper import World

from tapblock.components.game_state import GameMode
from tapblock.events.bus import EventBus
from tapblock.rendering.board_renderer import BoardRenderer
from tapblock.rendering.context import RenderContext, build_render_context
from tapblock.rendering.game_over_renderer import GameOverRenderer
from tapblock.systems.board_ops import get_board
from tapblock.systems.viewport import get_board_view
from tapblock.utils.game_state import current_mode


class RenderSystem:
    """Draws the board state once per frame; never mutates it."""

    def __init__(self, world: World, event_bus: EventBus, window, session_log=None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.session_log = session_log
        self._render_ctx: RenderContext | None = None
        self._board_renderer = BoardRenderer()
        self._game_over_renderer = GameOverRenderer()

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True

        mode = current_mode(self.world)
        entry = get_board(self.world)
        view = get_board_view(self.world)
        if mode == GameMode.MENU or entry is None or view is None:
            self._render_ctx = None
            return

        _, board = entry
        ctx = build_render_context(
            world=self.world,
            window_width=self.window.width,
            window_height=self.window.height,
            board=board,
            view=view,
        )
        if mode == GameMode.GAME_OVER and self.session_log is not None:
            ctx.best_score = self.session_log.best_score(board.width, board.height, board.colors)
        self._render_ctx = ctx
        if headless:
            return

        self._board_renderer.render(arcade, ctx)
        if mode == GameMode.GAME_OVER:
            self._game_over_renderer.render(arcade, ctx)
