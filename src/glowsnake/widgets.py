# widgets.py
"""Minimal pointer controls for the side panel."""
from typing import Callable, Optional

import pygame  # type: ignore
from pygame import Rect  # type: ignore

from .config import ACCENT, TEXT, TEXT_DIM


class Button:
    def __init__(self, rect, text, font, callback: Callable[[], None], enabled: bool = True):
        self.rect = Rect(rect)
        self.text = text
        self.font = font
        self.callback = callback
        self.enabled = enabled
        self.hover = False

    def handle_event(self, event) -> bool:
        """Returns True if the event was a click on this button."""
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                if self.enabled:
                    self.callback()
                return True
        return False

    def draw(self, screen: pygame.Surface) -> None:
        if not self.enabled:
            bg, border, fg = (24, 28, 36), (45, 50, 60), TEXT_DIM
        elif self.hover:
            bg, border, fg = (14, 116, 144), ACCENT, TEXT
        else:
            bg, border, fg = (30, 41, 59), (71, 85, 105), TEXT
        pygame.draw.rect(screen, bg, self.rect, border_radius=8)
        pygame.draw.rect(screen, border, self.rect, 1, border_radius=8)
        txt = self.font.render(self.text, True, fg)
        screen.blit(txt, txt.get_rect(center=self.rect.center))


class Slider:
    """Horizontal range control; values snap to ``step`` within ``[vmin, vmax]``."""

    def __init__(
        self,
        rect,
        vmin: int,
        vmax: int,
        step: int,
        value: int,
        on_change: Optional[Callable[[int], None]] = None,
    ):
        self.rect = Rect(rect)
        self.vmin = vmin
        self.vmax = vmax
        self.step = step
        self.value = self.clamp(value)
        self.on_change = on_change
        self.dragging = False

    def clamp(self, value: int) -> int:
        return max(self.vmin, min(self.vmax, int(value)))

    def value_at(self, x: int) -> int:
        frac = (x - self.rect.left) / max(self.rect.width, 1)
        frac = max(0.0, min(1.0, frac))
        raw = self.vmin + frac * (self.vmax - self.vmin)
        snapped = self.vmin + round((raw - self.vmin) / self.step) * self.step
        return self.clamp(snapped)

    def knob_x(self) -> int:
        frac = (self.value - self.vmin) / max(self.vmax - self.vmin, 1)
        return int(self.rect.left + frac * self.rect.width)

    def _set_from_x(self, x: int) -> None:
        new = self.value_at(x)
        if new != self.value:
            self.value = new
            if self.on_change is not None:
                self.on_change(new)

    def handle_event(self, event) -> bool:
        # generous vertical hit area around the thin track
        hit = self.rect.inflate(0, 16)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if hit.collidepoint(event.pos):
                self.dragging = True
                self._set_from_x(event.pos[0])
                return True
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self._set_from_x(event.pos[0])
            return True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self.dragging:
            self.dragging = False
            return True
        return False

    def draw(self, screen: pygame.Surface) -> None:
        track = Rect(self.rect.left, self.rect.centery - 3, self.rect.width, 6)
        pygame.draw.rect(screen, (51, 65, 85), track, border_radius=3)
        kx = self.knob_x()
        filled = Rect(track.left, track.top, kx - track.left, track.height)
        pygame.draw.rect(screen, ACCENT, filled, border_radius=3)
        pygame.draw.circle(screen, (34, 211, 238), (kx, self.rect.centery), 8)
