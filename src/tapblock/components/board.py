from dataclasses import dataclass

import numpy as np


@dataclass(slots=True)
class Board:
    """Grid of colour indices plus the parallel marked buffer.

    ``grid`` and ``marked`` are ``(height, width)`` arrays indexed ``[y, x]``;
    row 0 is the top row and gravity pulls towards row ``height - 1``.
    Colour 0 is an empty cell, ``1..colors`` are block colours.
    """
    width: int
    height: int
    colors: int
    grid: np.ndarray
    marked: np.ndarray

    def inbounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height
