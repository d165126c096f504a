# controls.py
"""Keyboard mapping to intents, and intents to state transitions."""
from dataclasses import dataclass
from typing import Optional, Tuple
import random

import pygame  # type: ignore

from .config import CFG, UP, DOWN, LEFT, RIGHT, Config
from .game import GameState, start, turn, toggle_pause, reset, set_speed

TOGGLE = "toggle"
START = "start"
RESET = "reset"
TURN = "turn"
SPEED = "speed"


@dataclass(frozen=True)
class Intent:
    kind: str
    direction: Tuple[int, int] = (0, 0)
    speed_ms: int = 0


def turn_to(direction: Tuple[int, int]) -> Intent:
    return Intent(TURN, direction=direction)


# pygame key codes are layout-level lower case, so shift/caps lock don't matter
KEY_INTENTS = {
    pygame.K_SPACE: Intent(TOGGLE),
    pygame.K_RETURN: Intent(TOGGLE),
    pygame.K_KP_ENTER: Intent(TOGGLE),
    pygame.K_ESCAPE: Intent(RESET),
    pygame.K_UP: turn_to(UP),
    pygame.K_w: turn_to(UP),
    pygame.K_DOWN: turn_to(DOWN),
    pygame.K_s: turn_to(DOWN),
    pygame.K_LEFT: turn_to(LEFT),
    pygame.K_a: turn_to(LEFT),
    pygame.K_RIGHT: turn_to(RIGHT),
    pygame.K_d: turn_to(RIGHT),
}


def key_to_intent(key: int) -> Optional[Intent]:
    return KEY_INTENTS.get(key)


def play_intent(state: GameState) -> Intent:
    """What the play/pause/restart button means right now."""
    return Intent(START) if state.is_idle else Intent(TOGGLE)


def apply_intent(
    state: GameState,
    intent: Intent,
    rng: random.Random,
    cfg: Config = CFG,
) -> GameState:
    if intent.kind == TOGGLE:
        return toggle_pause(state, rng, cfg)
    if intent.kind == START:
        return start(state)
    if intent.kind == RESET:
        return reset(state, rng, cfg)
    if intent.kind == TURN:
        return turn(state, *intent.direction)
    if intent.kind == SPEED:
        return set_speed(state, intent.speed_ms, cfg)
    raise ValueError(f"Unknown intent: {intent.kind}")
