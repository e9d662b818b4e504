from __future__ import annotations

import sys

SQUARES = 32

START_SPEED = 0.15  # seconds per tick
SPEED_FACTOR = 0.95
MIN_SPEED = 0.06

FRUIT_SCORE = 50
TAIL_MOVE_SCORE = 1

WIDTH, HEIGHT = 800, 900
FPS = 60
HUD_HEIGHT = 40
BOARD_MARGIN = 80
FONT_SIZE = 60

BLACK = (0, 0, 0)
DARKBLUE = (0, 82, 172)
LIGHTGRAY = (200, 200, 200)
WHITE = (255, 255, 255)
GREEN = (0, 228, 48)

BACKGROUND_COLOR = BLACK
BOARD_COLOR = DARKBLUE
BODY_COLOR = LIGHTGRAY
HEAD_COLOR = WHITE
FRUIT_COLOR = GREEN
TEXT_COLOR = WHITE

# Browser builds cannot close their own tab.
ALLOW_QUIT = sys.platform != "emscripten"
