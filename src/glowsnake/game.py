# game.py
"""
Game state and its transitions.

Every transition is a pure function ``(state, ...) -> new state``; the caller
owns the random source, persistence, scheduling and drawing.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple
import random

from .config import CFG, COLS, ROWS, START_CELL, STILL, RIGHT, HEADINGS, Config
from .grid import Cell, step, random_empty_cell


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class TickResult(Enum):
    IDLE = "idle"      # not running, nothing happened
    MOVED = "moved"
    ATE = "ate"
    DIED = "died"


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


# ---------- State ----------
@dataclass(frozen=True)
class GameState:
    snake: Tuple[Cell, ...]        # head at index 0
    direction: Tuple[int, int]     # applied on the last tick
    pending: Tuple[int, int]       # applied on the next tick
    food: Cell
    score: int
    best: int
    speed: int                     # ms per tick
    running: bool
    game_over: bool

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def phase(self) -> Phase:
        if self.game_over:
            return Phase.GAME_OVER
        if self.running:
            return Phase.RUNNING
        if self.pending == STILL:
            return Phase.IDLE
        return Phase.PAUSED

    @property
    def is_idle(self) -> bool:
        return self.phase is Phase.IDLE

    @property
    def shown_best(self) -> int:
        return max(self.best, self.score)


def new_game_state(rng: random.Random, best: int = 0, cfg: Config = CFG) -> GameState:
    snake = (START_CELL,)
    return GameState(
        snake=snake,
        direction=STILL,
        pending=STILL,
        food=random_empty_cell(snake, rng, COLS, ROWS),
        score=0,
        best=best,
        speed=cfg.initial_speed_ms,
        running=False,
        game_over=False,
    )


# ---------- Transitions ----------
def start(state: GameState) -> GameState:
    """Leave the idle screen heading right. Any other phase is left alone."""
    if not state.is_idle:
        return state
    return replace(state, direction=RIGHT, pending=RIGHT, running=True)


def turn(state: GameState, dx: int, dy: int) -> GameState:
    """Queue a new heading; a 180° reversal of the applied direction is ignored."""
    cand = (dx, dy)
    if cand not in HEADINGS:
        raise ValueError(f"not a unit heading: {cand}")
    if is_opposite(cand, state.direction):
        return state
    return replace(state, pending=cand)


def reset(state: GameState, rng: random.Random, cfg: Config = CFG) -> GameState:
    """Back to the idle screen; only the best score survives."""
    return new_game_state(rng, best=state.best, cfg=cfg)


def toggle_pause(state: GameState, rng: random.Random, cfg: Config = CFG) -> GameState:
    if state.game_over:
        return reset(state, rng, cfg)
    if state.pending == STILL:
        return state
    return replace(state, running=not state.running)


def set_speed(state: GameState, speed_ms: int, cfg: Config = CFG) -> GameState:
    return replace(state, speed=cfg.clamp_speed(speed_ms))


def tick(
    state: GameState,
    rng: random.Random,
    cfg: Config = CFG,
) -> Tuple[GameState, TickResult]:
    """
    Advance the snake one cell.
    - Moving onto any current body cell ends the game; the snake is left as is.
    - Eating grows the snake by one, bumps the score, speeds up (down to
      ``cfg.min_speed_ms``) and relocates the food off the new body.
    """
    if not state.running or state.game_over or state.pending == STILL:
        return state, TickResult.IDLE

    direction = state.pending
    new_head = step(state.head, direction, COLS, ROWS)

    if new_head in state.snake:
        dead = replace(
            state,
            running=False,
            game_over=True,
            best=max(state.best, state.score),
        )
        return dead, TickResult.DIED

    if new_head == state.food:
        snake = (new_head,) + state.snake
        moved = replace(
            state,
            snake=snake,
            direction=direction,
            score=state.score + 1,
            speed=max(cfg.min_speed_ms, state.speed - cfg.speed_step_ms),
            food=random_empty_cell(snake, rng, COLS, ROWS),
        )
        return moved, TickResult.ATE

    snake = (new_head,) + state.snake[:-1]
    return replace(state, snake=snake, direction=direction), TickResult.MOVED
