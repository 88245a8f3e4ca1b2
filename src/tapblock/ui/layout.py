from tapblock.constants import BOARD_MARGIN
from tapblock.utils.affine import Affine, affine, fit_transform


def compute_board_transform(
    viewport_width: float,
    viewport_height: float,
    cols: int,
    rows: int,
    margin: float = BOARD_MARGIN,
) -> Affine:
    """Return the grid-to-screen transform used by both rendering and pointer picking.

    The board is fitted inside the viewport minus ``margin`` on each side; a
    margin that would leave no room is ignored.
    """
    inner_w = viewport_width - 2 * margin
    inner_h = viewport_height - 2 * margin
    if inner_w <= 0 or inner_h <= 0:
        return fit_transform(viewport_width, viewport_height, cols, rows)
    fitted = fit_transform(inner_w, inner_h, cols, rows)
    return affine(fitted.tx + margin, fitted.ty + margin, fitted.a, 0.0)
