from pathlib import Path

# Board defaults used for the very first session (no session log yet).
BOARD_WIDTH = 10
BOARD_HEIGHT = 16
COLOR_COUNT = 4

# Player-adjustable ranges offered by the menu. The board itself accepts any positive size.
WIDTH_RANGE = (4, 32)
HEIGHT_RANGE = (4, 64)
COLOR_RANGE = (2, 6)

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "TapBlock"

# Float RGB triplets in [0, 1]. Index 0 is the background / empty cell colour.
PALETTE = (
    (0.27, 0.27, 0.27),
    (1.00, 0.35, 0.35),
    (0.35, 1.00, 0.35),
    (0.35, 0.35, 1.00),
    (1.00, 1.00, 0.35),
    (1.00, 0.35, 1.00),
    (0.35, 1.00, 1.00),
)
# Marked cells are drawn as c ** MARK_GAMMA per channel.
MARK_GAMMA = 0.25
OUTLINE_COLOR = (0, 0, 0)
OVERLAY_TEXT_COLOR = (255, 255, 255)
# Overlay font sizes in grid units (multiplied by the current scale).
GAME_OVER_FONT_UNITS = 0.8
SCORE_FONT_UNITS = 0.5

# Menu layout
MENU_BUTTON_WIDTH = 240.0
MENU_BUTTON_HEIGHT = 56.0
MENU_STEP_BUTTON_SIZE = 44.0
MENU_ROW_SPACING = 70.0

# Mouse de-bounce
PRESS_MIN_INTERVAL = 0.2
PRESS_MIN_DISTANCE = 6.0

SESSION_LOG_PATH = Path(__file__).resolve().parents[2] / "data" / "session_log.json"

# Pixels kept free around the board on every side.
BOARD_MARGIN = 8.0

# Input codes as reported by the window (kept here to avoid importing arcade in input systems).
MOUSE_BUTTON_LEFT = 1
KEY_ENTER = 65293
KEY_RETURN = 13
KEY_ESCAPE = 65307
