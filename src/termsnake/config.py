# config.py
from dataclasses import dataclass
from typing import Optional

# ----- Grid -----
GRID_W, GRID_H = 40, 15

# ----- Timing -----
TICK_MS = 100      # one tick; also the input-poll timeout

# ----- Start layout (tail first, head last) -----
START_SNAKE = ((0, 0), (1, 0))
START_FOOD = (5, 5)

# ----- Glyphs (terminal) -----
SNAKE_GLYPH = "#"
FOOD_GLYPH = "@"
EMPTY_GLYPH = "."

# ----- Window (pygame frontend) -----
CELL_SIZE = 20
BG    = (20, 20, 24)
GREEN = (80, 200, 80)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)
HUD_LINES = 3      # score, game over, quit hint

# ----- Per-run options -----
@dataclass
class Config:
    seed: Optional[int] = None
    frontend: str = "terminal"    # "terminal" or "window"
    log_file: Optional[str] = None
    log_level: str = "INFO"
