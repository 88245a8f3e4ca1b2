"""Grid algorithms for the tap-to-clear board.

Every operation works in place on a ``Board`` component. Coordinates are
``(x, y)`` with ``x`` the column and ``y`` the row, row 0 at the top.
"""
from __future__ import annotations

import math
import random
from typing import List, Sequence, Tuple

import numpy as np
from esper import World

from tapblock.components.board import Board

Position = Tuple[int, int]

# Offsets for the 4-connected neighbourhood: right, left, down, up.
CONNECT: Tuple[Position, ...] = ((+1, 0), (-1, 0), (0, +1), (0, -1))
MIN_GROUP = 2


def get_board(world: World) -> Tuple[int, Board] | None:
    """Return ``(entity, board)`` for the session's board, if one exists."""

    for entity, board in world.get_component(Board):
        return entity, board
    return None


def create_board(width: int, height: int, colors: int, rng: random.Random | None = None) -> Board:
    """Create a board with every cell set to a uniform random colour in ``[1, colors]``."""

    _check_dimensions(width, height, colors)
    rng = rng or random.Random()
    grid = np.zeros((height, width), dtype=np.uint8 if colors < 256 else np.int32)
    for y in range(height):
        for x in range(width):
            grid[y, x] = rng.randint(1, colors)
    return Board(
        width=width,
        height=height,
        colors=colors,
        grid=grid,
        marked=np.zeros((height, width), dtype=bool),
    )


def board_from_rows(rows: Sequence[Sequence[int]], colors: int | None = None) -> Board:
    """Build a board from explicit rows, top row first."""

    grid = np.array(rows, dtype=np.int32)
    if grid.ndim != 2:
        raise ValueError("Rows must form a rectangular 2D layout")
    height, width = grid.shape
    if colors is None:
        colors = max(int(grid.max()) if grid.size else 0, 1)
    _check_dimensions(width, height, colors)
    if grid.min() < 0 or grid.max() > colors:
        raise ValueError(f"Cell values must lie in [0, {colors}]")
    return Board(
        width=width,
        height=height,
        colors=colors,
        grid=grid,
        marked=np.zeros((height, width), dtype=bool),
    )


def _check_dimensions(width: int, height: int, colors: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Board size must be positive, got {width}x{height}")
    if colors <= 0:
        raise ValueError(f"Color count must be positive, got {colors}")


def to_cell(x: float, y: float) -> Position:
    """Floor board-space coordinates to a cell; non-finite input maps off the board."""

    x = float(x)
    y = float(y)
    if not (math.isfinite(x) and math.isfinite(y)):
        return (-1, -1)
    return (math.floor(x), math.floor(y))


def mark(board: Board, x: float, y: float) -> int:
    """Mark the group containing ``(x, y)`` and return its size.

    The marked buffer is always rebuilt from scratch. Groups smaller than
    two cells, empty seed cells and coordinates off the board all leave it
    cleared and return 0.
    """

    marked = board.marked
    marked.fill(False)
    x, y = to_cell(x, y)
    if not board.inbounds(x, y):
        return 0
    grid = board.grid
    color = grid[y, x]
    if color == 0:
        return 0

    count = 0
    marked[y, x] = True
    pending: List[Position] = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        count += 1
        for dx, dy in CONNECT:
            nx = cx + dx
            ny = cy + dy
            if not board.inbounds(nx, ny) or marked[ny, nx]:
                continue
            if grid[ny, nx] == color:
                marked[ny, nx] = True
                pending.append((nx, ny))

    if count < MIN_GROUP:
        marked.fill(False)
        return 0
    return count


def highlight(board: Board, x: float, y: float) -> int:
    """Preview the group under a board-space point (already inverse transformed)."""

    return mark(board, x, y)


def marked_positions(board: Board) -> List[Position]:
    return [(int(x), int(y)) for y, x in np.argwhere(board.marked)]


def gravity(board: Board, x: int, y: int) -> None:
    """Let the non-empty cells at or above row ``y`` of column ``x`` fall down to row ``y``.

    Relative order is kept; rows below ``y`` are untouched.
    """

    if not board.inbounds(x, y):
        return
    column = board.grid[: y + 1, x]
    filled = column[column != 0]
    column[:] = 0
    if filled.size:
        column[column.size - filled.size:] = filled


def shift(board: Board, x: int) -> None:
    """Close the run of empty columns starting at ``x`` by pulling the columns to its right leftward.

    A column counts as empty when its bottom cell is empty, which after
    gravity means the whole column is empty.
    """

    grid = board.grid
    width = board.width
    if not 0 <= x < width:
        return
    bottom = grid[board.height - 1]
    if bottom[x] != 0:
        return
    run = 0
    while x + run < width and bottom[x + run] == 0:
        run += 1
    if x + run >= width:
        return
    grid[:, x:width - run] = grid[:, x + run:].copy()
    grid[:, width - run:] = 0


def collapse(board: Board) -> None:
    """Apply gravity to every column, then compact empty columns leftward."""

    grid = board.grid
    width = board.width
    height = board.height
    for x in range(width):
        for y in range(height - 1, -1, -1):
            if grid[y, x] == 0:
                # One pass from the lowest gap packs the whole column.
                gravity(board, x, y)
                break

    for x in range(width - 1):
        if grid[height - 1, x] == 0:
            shift(board, x)


def clear(board: Board, x: float, y: float) -> List[Position]:
    """Remove the group at ``(x, y)`` and collapse the board.

    Returns the removed cell positions; empty when there was no group.
    """

    mark(board, x, y)
    removed = marked_positions(board)
    if removed:
        board.grid[board.marked] = 0
    collapse(board)
    return removed


def is_done(board: Board) -> bool:
    """True when no cell belongs to a removable group.

    A group of two or more cells exists exactly when some pair of
    4-neighbours shares a non-empty colour, so the marked buffer is left alone.
    """

    grid = board.grid
    across = (grid[:, 1:] == grid[:, :-1]) & (grid[:, 1:] != 0)
    down = (grid[1:, :] == grid[:-1, :]) & (grid[1:, :] != 0)
    return not (across.any() or down.any())


def blocks_left(board: Board) -> int:
    return int(np.count_nonzero(board.grid))


score = blocks_left
