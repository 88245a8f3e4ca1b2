from __future__ import annotations

from typing import TYPE_CHECKING

from tapblock.constants import GAME_OVER_FONT_UNITS, OVERLAY_TEXT_COLOR, SCORE_FONT_UNITS
from tapblock.systems.board_ops import score

if TYPE_CHECKING:
    from tapblock.rendering.context import RenderContext


class GameOverRenderer:
    """Writes the final score over the finished board, a quarter of the way down."""

    def render(self, arcade, ctx: RenderContext) -> None:
        board = ctx.board
        anchor_x, anchor_y = ctx.to_window(board.width / 2, board.height / 4)
        arcade.draw_text(
            "Game Over",
            anchor_x,
            anchor_y,
            OVERLAY_TEXT_COLOR,
            GAME_OVER_FONT_UNITS * ctx.scale,
            anchor_x="center",
            anchor_y="bottom",
        )
        arcade.draw_text(
            f"Score: {score(board)}",
            anchor_x,
            anchor_y,
            OVERLAY_TEXT_COLOR,
            SCORE_FONT_UNITS * ctx.scale,
            anchor_x="center",
            anchor_y="top",
        )
        if ctx.best_score is None:
            return
        arcade.draw_text(
            f"Best: {ctx.best_score}",
            anchor_x,
            anchor_y - SCORE_FONT_UNITS * ctx.scale * 1.5,
            OVERLAY_TEXT_COLOR,
            SCORE_FONT_UNITS * ctx.scale * 0.8,
            anchor_x="center",
            anchor_y="top",
        )
