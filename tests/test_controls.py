import os
import random
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402

from glowsnake.config import UP, DOWN, LEFT, RIGHT  # noqa: E402
from glowsnake.controls import (  # noqa: E402
    Intent, TOGGLE, START, RESET, TURN, SPEED,
    key_to_intent, play_intent, apply_intent,
)
from glowsnake.game import Phase, new_game_state, start  # noqa: E402


class TestKeyMapping(unittest.TestCase):

    def test_toggle_keys(self):
        for key in (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER):
            self.assertEqual(key_to_intent(key), Intent(TOGGLE))

    def test_escape_resets(self):
        self.assertEqual(key_to_intent(pygame.K_ESCAPE), Intent(RESET))

    def test_arrows_and_wasd(self):
        expected = {
            pygame.K_UP: UP, pygame.K_w: UP,
            pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
            pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
            pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
        }
        for key, direction in expected.items():
            intent = key_to_intent(key)
            self.assertEqual(intent.kind, TURN)
            self.assertEqual(intent.direction, direction)

    def test_unmapped_key(self):
        self.assertIsNone(key_to_intent(pygame.K_q))


class TestApplyIntent(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(5)

    def test_play_intent_depends_on_phase(self):
        idle = new_game_state(self.rng)
        self.assertEqual(play_intent(idle), Intent(START))
        self.assertEqual(play_intent(start(idle)), Intent(TOGGLE))

    def test_start_then_toggle(self):
        state = apply_intent(new_game_state(self.rng), Intent(START), self.rng)
        self.assertIs(state.phase, Phase.RUNNING)
        state = apply_intent(state, Intent(TOGGLE), self.rng)
        self.assertIs(state.phase, Phase.PAUSED)

    def test_turn_and_speed(self):
        state = start(new_game_state(self.rng))
        state = apply_intent(state, Intent(TURN, direction=UP), self.rng)
        self.assertEqual(state.pending, UP)
        state = apply_intent(state, Intent(SPEED, speed_ms=70), self.rng)
        self.assertEqual(state.speed, 70)

    def test_reset(self):
        state = start(new_game_state(self.rng))
        state = apply_intent(state, Intent(RESET), self.rng)
        self.assertIs(state.phase, Phase.IDLE)

    def test_unknown_intent(self):
        with self.assertRaises(ValueError):
            apply_intent(new_game_state(self.rng), Intent("jump"), self.rng)


if __name__ == "__main__":
    unittest.main()
