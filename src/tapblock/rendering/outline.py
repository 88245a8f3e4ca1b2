from __future__ import annotations

from typing import List, Tuple

import numpy as np

Segment = Tuple[Tuple[float, float], Tuple[float, float]]


def outline_segments(grid: np.ndarray) -> List[Segment]:
    """Grid-space line segments between 4-neighbours of different value.

    Segments sit on the right edge or the bottom edge of the cell they are
    found from; the board's outer border is never outlined.
    """
    segments: List[Segment] = []
    east = grid[:, :-1] != grid[:, 1:]
    south = grid[:-1, :] != grid[1:, :]
    for y, x in np.argwhere(east):
        right = float(x) + 1.0
        segments.append(((right, float(y)), (right, float(y) + 1.0)))
    for y, x in np.argwhere(south):
        bottom = float(y) + 1.0
        segments.append(((float(x), bottom), (float(x) + 1.0, bottom)))
    return segments
