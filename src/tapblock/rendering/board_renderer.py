from __future__ import annotations

from typing import TYPE_CHECKING

from tapblock.constants import OUTLINE_COLOR
from tapblock.rendering.outline import outline_segments
from tapblock.rendering.palette import cell_color

if TYPE_CHECKING:
    from tapblock.rendering.context import RenderContext


class BoardRenderer:
    """Draws cells, the marked group and the outlines between differently coloured neighbours."""

    def render(self, arcade, ctx: RenderContext) -> None:
        board = ctx.board
        size = ctx.scale
        # Slight overdraw hides seams between neighbouring squares.
        draw_size = size + 1.0
        for (x, y), (left, bottom, _) in ctx.cells.items():
            value = int(board.grid[y, x])
            if value == 0:
                continue
            color = cell_color(value, bool(board.marked[y, x]))
            arcade.draw_lbwh_rectangle_filled(left, bottom - 1.0, draw_size, draw_size, color)

        line_width = max(1.0, size / 32)
        for start, end in outline_segments(board.grid):
            x1, y1 = ctx.to_window(*start)
            x2, y2 = ctx.to_window(*end)
            arcade.draw_line(x1, y1, x2, y2, OUTLINE_COLOR, line_width)
