from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from esper import World

from tapblock.components.board import Board
from tapblock.components.board_view import BoardView
from tapblock.utils.affine import project

BoardPos = Tuple[int, int]


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents.

    ``cells`` maps ``(x, y)`` to the cell's window rectangle ``(left, bottom, size)``
    in the window's y-up coordinates. ``best_score`` is the lowest logged score for
    this board configuration, filled in for the game-over overlay.
    """

    world: World
    window_width: int
    window_height: int
    board: Board
    view: BoardView
    cells: Dict[BoardPos, Tuple[float, float, float]] = field(default_factory=dict)
    best_score: Optional[int] = None

    @property
    def scale(self) -> float:
        return self.view.forward.a

    def to_window(self, gx: float, gy: float) -> Tuple[float, float]:
        """Map a grid-space point to window coordinates."""
        sx, sy = project(self.view.forward, gx, gy)
        return sx, self.view.viewport_height - sy


def build_render_context(
    world: World,
    window_width: int,
    window_height: int,
    board: Board,
    view: BoardView,
) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    ctx = RenderContext(
        world=world,
        window_width=window_width,
        window_height=window_height,
        board=board,
        view=view,
    )
    size = ctx.scale
    for y in range(board.height):
        for x in range(board.width):
            left, top = ctx.to_window(x, y)
            ctx.cells[(x, y)] = (left, top - size, size)
    return ctx
