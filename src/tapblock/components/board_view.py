from dataclasses import dataclass

from tapblock.utils.affine import Affine


@dataclass(slots=True)
class BoardView:
    """Screen fit for the board entity it sits on.

    ``forward`` maps grid units to screen pixels (y-down, origin top-left);
    ``inverse`` is cached because every pointer event maps back through it.
    """
    forward: Affine
    inverse: Affine
    viewport_width: float
    viewport_height: float
