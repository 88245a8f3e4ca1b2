"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class GameMode(Enum):
    """High-level game modes that drive which systems react to input."""
    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the currently active game mode.

    ``input_guard_press_id`` holds the press that caused the last mode change
    so systems subscribed after the menu do not act on the same click.
    """
    mode: GameMode = GameMode.MENU
    input_guard_press_id: Optional[int] = None
