"""Application configuration constants."""

from __future__ import annotations

# Performance
TARGET_FPS = 60

# Window
APP_NAME = "NeatPic"
DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 720
MIN_WINDOW_WIDTH = 320
MIN_WINDOW_HEIGHT = 240
MAX_WINDOW_DIMENSION = 2**31 - 1  # C int passed to InitWindow

# Settings storage
APP_DIR_NAME = "neatpic"
SETTINGS_FILE_NAME = "settings.yaml"

# Zoom
WHEEL_DELTA = 120.0         # host units per wheel notch
WHEEL_ZOOM_BASE = 1.1       # zoom multiplier per notch
MIN_ZOOM = 1e-4
ZOOM_SLIDER_MIN_PCT = 1.0
ZOOM_SLIDER_MAX_PCT = 1000.0

# Panels (pixels)
SIDE_PANEL_WIDTH = 270
SIDE_PANEL_PADDING = 10
TOP_PANEL_HEIGHT = 36
TOP_PANEL_MARGIN = 4
ZOOM_SLIDER_WIDTH = 300
UI_FONT_SIZE = 18
UI_LINE_HEIGHT = 28

# Colors (r, g, b, a)
BG_COLOR = (130, 130, 130, 255)        # raylib GRAY

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_NEXT_IMAGE = 262        # KEY_RIGHT
KEY_NEXT_IMAGE_ALT = 68     # KEY_D
KEY_PREV_IMAGE = 263        # KEY_LEFT
KEY_PREV_IMAGE_ALT = 65     # KEY_A
KEY_FIT_ZOOM = 70           # KEY_F
KEY_CLOSE = 256             # KEY_ESCAPE

MOUSE_BUTTON_LEFT = 0

# Supported image extensions (matched case-sensitively)
IMG_EXTS = frozenset({
    ".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tga", ".tif", ".tiff", ".webp",
})
