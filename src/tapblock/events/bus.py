from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# RAW WINDOW INPUT (window coordinates, y-up)
# ============================================================================
EVENT_MOUSE_PRESS_RAW = "mouse_press_raw"          # payload: x, y, button, modifiers
EVENT_MOUSE_RELEASE_RAW = "mouse_release_raw"      # payload: x, y, button, modifiers
EVENT_MOUSE_MOVE = "mouse_move"                    # payload: x, y, dx, dy
EVENT_MOUSE_LEAVE = "mouse_leave"                  # payload: x, y
EVENT_KEY_PRESS = "key_press"                      # payload: symbol, modifiers
EVENT_VIEWPORT_RESIZED = "viewport_resized"        # payload: width, height


# ============================================================================
# THROTTLED INPUT
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button, press_id
EVENT_MOUSE_RELEASE = "mouse_release"              # payload: x, y, button, press_id


# ============================================================================
# BOARD-SPACE INPUT (grid units, unfloored)
# ============================================================================
EVENT_CELL_HOVER = "cell_hover"                    # payload: x=float, y=float
EVENT_CELL_TAP = "cell_tap"                        # payload: x=float, y=float
EVENT_POINTER_LEFT = "pointer_left"                # payload: None


# ============================================================================
# BOARD
# ============================================================================
EVENT_SESSION_STARTED = "session_started"          # payload: width, height, colors
EVENT_BOARD_CREATED = "board_created"              # payload: entity, width, height, colors
EVENT_GAME_OVER = "game_over"                      # payload: score=int, width, height, colors


# ============================================================================
# GAME FLOW & MENU
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"              # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_MENU_NEW_GAME_SELECTED = "menu_new_game_selected"    # payload: press_id=int|None
EVENT_MENU_CONTINUE_SELECTED = "menu_continue_selected"    # payload: press_id=int|None
EVENT_MENU_REQUESTED = "menu_requested"                    # payload: reason=str
