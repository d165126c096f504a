import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402

from glowsnake.config import (  # noqa: E402
    Config, SLIDER_MIN, SLIDER_MAX, SLIDER_STEP, slider_to_speed, speed_to_slider,
)
from glowsnake.widgets import Button, Slider  # noqa: E402


def click(pos, kind=pygame.MOUSEBUTTONDOWN):
    return pygame.event.Event(kind, pos=pos, button=1)


class TestButton(unittest.TestCase):

    def setUp(self):
        self.clicks = 0
        self.button = Button((10, 10, 100, 40), "Play", None, self._clicked)

    def _clicked(self):
        self.clicks += 1

    def test_click_inside(self):
        self.assertTrue(self.button.handle_event(click((50, 30))))
        self.assertEqual(self.clicks, 1)

    def test_click_outside(self):
        self.assertFalse(self.button.handle_event(click((200, 30))))
        self.assertEqual(self.clicks, 0)

    def test_disabled_swallows_click(self):
        self.button.enabled = False
        self.assertTrue(self.button.handle_event(click((50, 30))))
        self.assertEqual(self.clicks, 0)

    def test_hover(self):
        self.button.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(20, 20)))
        self.assertTrue(self.button.hover)
        self.button.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(500, 20)))
        self.assertFalse(self.button.hover)


class TestSlider(unittest.TestCase):

    def setUp(self):
        self.changes = []
        self.slider = Slider((0, 0, 160, 16), 40, 200, 10, 90, on_change=self.changes.append)

    def test_value_at_snaps_and_clamps(self):
        self.assertEqual(self.slider.value_at(0), 40)
        self.assertEqual(self.slider.value_at(160), 200)
        self.assertEqual(self.slider.value_at(80), 120)
        self.assertEqual(self.slider.value_at(83), 120)
        self.assertEqual(self.slider.value_at(-30), 40)
        self.assertEqual(self.slider.value_at(999), 200)

    def test_drag(self):
        self.assertTrue(self.slider.handle_event(click((0, 8))))
        self.assertTrue(self.slider.dragging)
        self.slider.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(160, 40)))
        self.slider.handle_event(click((160, 40), pygame.MOUSEBUTTONUP))
        self.assertFalse(self.slider.dragging)
        self.assertEqual(self.changes, [40, 200])
        self.assertEqual(self.slider.value, 200)

    def test_motion_without_press_is_ignored(self):
        self.assertFalse(self.slider.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 8))))
        self.assertEqual(self.changes, [])

    def test_slider_range_matches_speed_clamp(self):
        cfg = Config()
        self.assertEqual(slider_to_speed(SLIDER_MAX), cfg.min_speed_ms)
        self.assertEqual(slider_to_speed(SLIDER_MIN), cfg.max_speed_ms)
        for value in range(SLIDER_MIN, SLIDER_MAX + 1, SLIDER_STEP):
            speed = slider_to_speed(value)
            self.assertEqual(cfg.clamp_speed(speed), speed)

    def test_speed_mapping_is_inverse(self):
        self.assertEqual(slider_to_speed(200), 40)
        self.assertEqual(slider_to_speed(40), 200)
        self.assertEqual(speed_to_slider(150), 90)
        self.assertLess(slider_to_speed(150), slider_to_speed(100))


if __name__ == "__main__":
    unittest.main()
