import random

import numpy as np
import pytest

from tapblock.components.game_state import GameMode
from tapblock.events.bus import EVENT_CELL_HOVER, EVENT_GAME_OVER, EVENT_SESSION_STARTED, EventBus
from tapblock.rendering.board_renderer import BoardRenderer
from tapblock.rendering.palette import cell_color
from tapblock.systems.board import BoardSystem
from tapblock.systems.input import InputSystem
from tapblock.systems.render import RenderSystem
from tapblock.systems.session_log_system import SessionLogSystem
from tapblock.systems.viewport import ViewportSystem, get_board_view
from tapblock.utils.affine import project
from tapblock.utils.game_state import set_game_mode
from tapblock.world import create_world


class _DummyWindow:
    width = 800
    height = 600


class _RecordingArcade:
    """Collects draw calls in place of the arcade drawing module."""

    def __init__(self):
        self.rects = []
        self.lines = []

    def draw_lbwh_rectangle_filled(self, left, bottom, width, height, color):
        self.rects.append((left, bottom, width, height, color))

    def draw_line(self, x1, y1, x2, y2, color, line_width):
        self.lines.append(((x1, y1), (x2, y2)))


def _setup():
    bus = EventBus()
    world = create_world(bus, initial_mode=GameMode.PLAYING, rng=random.Random(2))
    board_system = BoardSystem(world, bus)
    ViewportSystem(world, bus, 800, 600)
    input_system = InputSystem(bus, world)
    render = RenderSystem(world, bus, _DummyWindow())
    board = board_system.start_session(4, 4, 2)
    board.grid[:] = np.array(
        [
            [1, 1, 2, 2],
            [2, 2, 1, 1],
            [1, 2, 1, 2],
            [0, 0, 2, 2],
        ]
    )
    return bus, world, input_system, render


def _cell_under_pixel(cells, px, py):
    """The drawn cell covering the centre of window pixel (px, py), if any."""
    cx, cy = px + 0.5, py + 0.5
    for pos, (left, bottom, size) in cells.items():
        if left <= cx < left + size and bottom <= cy < bottom + size:
            return pos
    return None


def test_cell_rectangles_follow_the_board_transform():
    _, world, _, render = _setup()

    render.process()

    cells = render._render_ctx.cells
    view = get_board_view(world)
    assert len(cells) == 16
    for (x, y), (left, bottom, size) in cells.items():
        sx, sy = project(view.forward, x, y + 1)
        assert left == pytest.approx(sx)
        assert bottom == pytest.approx(600 - sy)
        assert size == pytest.approx(view.forward.a)
    assert cells[(0, 3)] == pytest.approx((108.0, 8.0, 146.0))


def test_drawn_cells_agree_with_input_mapping():
    _, _, input_system, render = _setup()
    render.process()
    cells = render._render_ctx.cells

    # Rows 300 and 299 sit either side of the edge between board rows 1 and 2.
    for px, py in [(181, 81), (500, 300), (500, 299), (254, 153), (253, 154), (650, 590)]:
        bx, by = input_system.to_board_space(px, py)
        assert _cell_under_pixel(cells, px, py) == (int(np.floor(bx)), int(np.floor(by)))

    assert _cell_under_pixel(cells, 500, 300) == (2, 1)
    assert _cell_under_pixel(cells, 500, 299) == (2, 2)

    assert _cell_under_pixel(cells, 20, 300) is None
    bx, _ = input_system.to_board_space(20, 300)
    assert bx < 0


def test_marked_cells_use_lightened_color():
    bus, _, _, render = _setup()
    bus.emit(EVENT_CELL_HOVER, x=0.5, y=0.5)
    render.process()
    recorder = _RecordingArcade()

    BoardRenderer().render(recorder, render._render_ctx)

    colors = {(left, bottom + 1.0): color for left, bottom, _, _, color in recorder.rects}
    cells = render._render_ctx.cells
    assert colors[cells[(0, 0)][:2]] == cell_color(1, marked=True)
    assert colors[cells[(1, 0)][:2]] == cell_color(1, marked=True)
    assert colors[cells[(0, 1)][:2]] == cell_color(2)
    # Empty cells are left to the background.
    assert len(recorder.rects) == 14
    assert cells[(0, 3)][:2] not in colors
    assert recorder.lines


def test_game_over_overlay_carries_best_logged_score(tmp_path):
    bus, world, _, render = _setup()
    render.session_log = SessionLogSystem(
        world, bus, save_path=tmp_path / "log.json", load_existing=False
    )
    for (width, height), score in [((5, 4), 1), ((4, 4), 6), ((4, 4), 3)]:
        bus.emit(EVENT_SESSION_STARTED, width=width, height=height, colors=2)
        bus.emit(EVENT_GAME_OVER, score=score)
    set_game_mode(world, bus, GameMode.PLAYING)

    render.process()
    assert render._render_ctx.best_score is None

    set_game_mode(world, bus, GameMode.GAME_OVER)
    render.process()
    assert render._render_ctx.best_score == 3


def test_menu_mode_draws_no_board():
    bus, world, _, render = _setup()
    render.process()
    assert render._render_ctx is not None
    set_game_mode(world, bus, GameMode.MENU)

    render.process()

    assert render._render_ctx is None
