from __future__ import annotations

import colorsys
from typing import Tuple

from tapblock.constants import MARK_GAMMA, PALETTE

RGB = Tuple[int, int, int]


def base_color(value: int) -> Tuple[float, float, float]:
    """Float RGB for a cell value; colours past the palette are spread around the hue wheel."""
    if 0 <= value < len(PALETTE):
        return PALETTE[value]
    extra = value - len(PALETTE)
    hue = (extra * 0.381966) % 1.0
    return colorsys.hsv_to_rgb(hue, 0.65, 1.0)


def lighten(channel: float, gamma: float = MARK_GAMMA) -> float:
    return channel ** gamma


def cell_color(value: int, marked: bool = False) -> RGB:
    """0-255 RGB used to fill a cell, gamma lightened when it is part of the marked group."""
    r, g, b = base_color(int(value))
    if marked:
        r, g, b = lighten(r), lighten(g), lighten(b)
    return (round(r * 255), round(g * 255), round(b * 255))


def background_color() -> RGB:
    return cell_color(0)
