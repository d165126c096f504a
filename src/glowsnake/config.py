from dataclasses import dataclass, field
from pathlib import Path
import os

# ----- Canvas & grid -----
CANVAS_SIZE = 500
TILE = 25
COLS, ROWS = CANVAS_SIZE // TILE, CANVAS_SIZE // TILE
START_CELL = (10, 10)

PANEL_W = 260
WIDTH, HEIGHT = CANVAS_SIZE + PANEL_W, CANVAS_SIZE

# ----- Colors -----
BG          = (1, 4, 9)          # #010409
GRID_LINE   = (255, 255, 255, 13)
FOOD_INNER  = (244, 63, 94)      # #F43F5E
FOOD_OUTER  = (190, 18, 60)      # #BE123C
HEAD_INNER  = (6, 182, 212)      # #06B6D4
HEAD_OUTER  = (8, 145, 178)      # #0891B2
BODY_INNER  = (2, 132, 199)      # #0284C7
BODY_OUTER  = (3, 105, 161)      # #0369A1
PANEL_BG    = (13, 17, 26)
TEXT        = (226, 232, 240)
TEXT_DIM    = (120, 130, 145)
ACCENT      = (8, 145, 178)
GAME_OVER   = (244, 63, 94)

# ----- Directions (dx, dy) -----
STILL = (0, 0)
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
HEADINGS = (UP, DOWN, LEFT, RIGHT)

# ----- Speed slider (user-facing "speed", inverse of the tick interval) -----
MIN_SPEED_MS, MAX_SPEED_MS = 40, 200
SLIDER_OFFSET = 240
SLIDER_MIN = SLIDER_OFFSET - MAX_SPEED_MS
SLIDER_MAX = SLIDER_OFFSET - MIN_SPEED_MS
SLIDER_STEP = 10

BEST_FILE_ENV = "GLOWSNAKE_BEST_FILE"


def default_best_path() -> Path:
    env = os.environ.get(BEST_FILE_ENV)
    if env:
        return Path(env)
    return Path.home() / ".glowsnake" / "best_score.json"


def slider_to_speed(value: int) -> int:
    """Higher slider value -> shorter tick interval."""
    return SLIDER_OFFSET - int(value)


def speed_to_slider(speed_ms: int) -> int:
    return SLIDER_OFFSET - int(speed_ms)


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: int | None = None
    initial_speed_ms: int = 150
    speed_step_ms: int = 2
    min_speed_ms: int = MIN_SPEED_MS
    max_speed_ms: int = MAX_SPEED_MS
    best_path: Path = field(default_factory=default_best_path)

    def clamp_speed(self, speed_ms: int) -> int:
        return max(self.min_speed_ms, min(self.max_speed_ms, int(speed_ms)))


CFG = Config()
