# render.py
"""
Painting: the board (grid + glow blobs), the start/game-over overlay and the
side panel. Nothing here mutates game state.
"""
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    CANVAS_SIZE, TILE, COLS, ROWS, PANEL_W,
    BG, GRID_LINE, PANEL_BG, TEXT, TEXT_DIM, ACCENT, GAME_OVER,
    FOOD_INNER, FOOD_OUTER, HEAD_INNER, HEAD_OUTER, BODY_INNER, BODY_OUTER,
)
from .game import GameState, Phase

Color = Tuple[int, int, int]

HEAD_GLOW = TILE * 1.5
BODY_GLOW = TILE * 1.0

HELP_LINES = (
    "MOVE: WASD or Arrow Keys",
    "PAUSE/PLAY: Space or Enter",
    "RESET: Esc",
)


@dataclass
class Fonts:
    title: pygame.font.Font
    big: pygame.font.Font
    body: pygame.font.Font
    small: pygame.font.Font


def load_fonts() -> Fonts:
    return Fonts(
        title=pygame.font.SysFont(None, 48),
        big=pygame.font.SysFont(None, 40),
        body=pygame.font.SysFont(None, 26),
        small=pygame.font.SysFont(None, 20),
    )


# ---------- Glow ----------
def glow_intensity(size: int, center: float, r0: float, r1: float) -> np.ndarray:
    """
    Radial falloff sampled at pixel centres, shape (size, size) indexed [x, y]:
    1.0 inside ``r0``, linear down to 0.0 at ``r1``.
    """
    coords = np.arange(size, dtype=np.float64) + 0.5
    dist = np.hypot(coords[:, None] - center, coords[None, :] - center)
    t = np.clip((dist - r0) / max(r1 - r0, 1e-6), 0.0, 1.0)
    return 1.0 - t


@lru_cache(maxsize=None)
def glow_sprite(color: Color, glow_radius: float) -> pygame.Surface:
    """3x3-cell sprite centred on a cell, premultiplied for additive blits."""
    size = TILE * 3
    radius = TILE / 2
    alpha = glow_intensity(size, TILE + radius, radius * 0.1, glow_radius * 0.7)
    rgb = np.rint(np.asarray(color, dtype=np.float64)[None, None, :] * alpha[..., None])
    return pygame.surfarray.make_surface(rgb.astype(np.uint8))


def draw_glow_cell(
    canvas: pygame.Surface,
    x: int,
    y: int,
    inner: Color,
    outer: Color,
    is_head: bool = False,
) -> None:
    px, py = x * TILE, y * TILE
    radius = TILE / 2
    sprite = glow_sprite(inner, HEAD_GLOW if is_head else BODY_GLOW)
    canvas.blit(sprite, (px - TILE, py - TILE), special_flags=pygame.BLEND_RGB_ADD)

    center = (px + radius, py + radius)
    pygame.draw.circle(canvas, inner, center, radius * 0.85)
    pygame.draw.circle(canvas, outer, center, radius * 0.85, 1)


# ---------- Board ----------
@lru_cache(maxsize=1)
def grid_overlay() -> pygame.Surface:
    surf = pygame.Surface((CANVAS_SIZE, CANVAS_SIZE), pygame.SRCALPHA)
    for x in range(COLS):
        for y in range(ROWS):
            pygame.draw.rect(surf, GRID_LINE, pygame.Rect(x * TILE, y * TILE, TILE, TILE), 1)
    return surf


def draw_board(canvas: pygame.Surface, state: GameState) -> None:
    canvas.fill(BG)
    canvas.blit(grid_overlay(), (0, 0))
    # food
    draw_glow_cell(canvas, state.food[0], state.food[1], FOOD_INNER, FOOD_OUTER)
    # snake, head first
    for i, (x, y) in enumerate(state.snake):
        if i == 0:
            draw_glow_cell(canvas, x, y, HEAD_INNER, HEAD_OUTER, is_head=True)
        else:
            draw_glow_cell(canvas, x, y, BODY_INNER, BODY_OUTER)


def overlay_visible(state: GameState) -> bool:
    return state.phase in (Phase.GAME_OVER, Phase.IDLE)


def draw_overlay(canvas: pygame.Surface, fonts: Fonts, state: GameState, start_button=None) -> None:
    """Dim the board; game over gets a restart prompt, idle gets the start button."""
    if not overlay_visible(state):
        return
    shade = pygame.Surface(canvas.get_size(), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 153))
    canvas.blit(shade, (0, 0))

    cx, cy = CANVAS_SIZE // 2, CANVAS_SIZE // 2
    if state.game_over:
        title = fonts.big.render("GAME OVER", True, GAME_OVER)
        sub = fonts.small.render("Press Enter or click Restart", True, TEXT_DIM)
        canvas.blit(title, title.get_rect(center=(cx, cy - 14)))
        canvas.blit(sub, sub.get_rect(center=(cx, cy + 20)))
    elif start_button is not None:
        start_button.draw(canvas)


# ---------- Side panel ----------
def draw_panel(
    screen: pygame.Surface,
    fonts: Fonts,
    state: GameState,
    widgets: Iterable = (),
) -> None:
    x0 = CANVAS_SIZE
    pygame.draw.rect(screen, PANEL_BG, pygame.Rect(x0, 0, PANEL_W, CANVAS_SIZE))
    pygame.draw.line(screen, (30, 41, 59), (x0, 0), (x0, CANVAS_SIZE))
    mid = x0 + PANEL_W // 2

    title = fonts.title.render("SNAKE", True, ACCENT)
    screen.blit(title, title.get_rect(center=(mid, 36)))

    for label, value, cx in (
        ("SCORE", state.score, x0 + PANEL_W // 4),
        ("BEST", state.shown_best, x0 + 3 * PANEL_W // 4),
    ):
        lab = fonts.small.render(label, True, TEXT_DIM)
        val = fonts.big.render(str(value), True, TEXT)
        screen.blit(lab, lab.get_rect(center=(cx, 76)))
        screen.blit(val, val.get_rect(center=(cx, 104)))

    for w in widgets:
        w.draw(screen)

    for i, line in enumerate(HELP_LINES):
        txt = fonts.small.render(line, True, TEXT_DIM)
        screen.blit(txt, txt.get_rect(center=(mid, CANVAS_SIZE - 60 + i * 18)))


def draw_frame(
    screen: pygame.Surface,
    fonts: Fonts,
    state: GameState,
    widgets: Iterable = (),
    start_button=None,
) -> None:
    canvas = screen.subsurface(pygame.Rect(0, 0, CANVAS_SIZE, CANVAS_SIZE))
    draw_board(canvas, state)
    draw_overlay(canvas, fonts, state, start_button)
    draw_panel(screen, fonts, state, widgets)
