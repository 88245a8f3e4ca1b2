"""Menu entities: every one also carries a ``MenuTag`` so the whole menu can be torn down at once."""
from dataclasses import dataclass
from enum import Enum, auto

from tapblock.constants import MENU_BUTTON_HEIGHT, MENU_BUTTON_WIDTH


class MenuAction(Enum):
    NEW_GAME = auto()
    CONTINUE = auto()
    # Step a GameSettings field by the button's delta.
    ADJUST = auto()


@dataclass
class MenuButton:
    """Clickable rectangle centred on ``(x, y)`` in window coordinates."""
    label: str
    action: MenuAction
    x: float
    y: float
    width: float = MENU_BUTTON_WIDTH
    height: float = MENU_BUTTON_HEIGHT
    enabled: bool = True
    setting: str | None = None
    delta: int = 0


@dataclass
class MenuStepper:
    """Value readout for one setting, drawn between its - and + buttons."""
    label: str
    setting: str
    x: float
    y: float


@dataclass
class MenuBackground:
    color: tuple[int, int, int] = (20, 30, 50)


@dataclass
class MenuTag:
    pass
