# main.py
from pathlib import Path
from typing import List, Optional
import argparse
import logging
import random

import pygame  # type: ignore

from .config import (
    CFG, Config, WIDTH, HEIGHT, CANVAS_SIZE, PANEL_W, TEXT_DIM,
    UP, DOWN, LEFT, RIGHT,
    SLIDER_MIN, SLIDER_MAX, SLIDER_STEP, slider_to_speed, speed_to_slider,
)
from .controls import Intent, SPEED, key_to_intent, play_intent, apply_intent, turn_to, RESET, START
from .game import GameState, Phase, TickResult, new_game_state, tick
from .render import Fonts, load_fonts, draw_frame
from .scheduler import TickScheduler, TICK_EVENT
from .storage import BestScoreStore
from .widgets import Button, Slider

logger = logging.getLogger(__name__)


class SnakeApp:
    """
    Owns the one ``GameState`` and applies effects after each transition:
    best-score persistence, timer re-arming, and marking the frame dirty.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        store: Optional[BestScoreStore] = None,
        scheduler: Optional[TickScheduler] = None,
        rng: Optional[random.Random] = None,
    ):
        self.cfg = cfg
        self.rng = rng or random.Random(cfg.seed)
        self.store = store or BestScoreStore(cfg.best_path)
        self.scheduler = scheduler or TickScheduler()

        best = self.store.load()
        logger.info("Best score loaded: %d", best)
        self.state: GameState = new_game_state(self.rng, best=best, cfg=cfg)
        self.dirty = True

        self.fonts: Optional[Fonts] = None
        self.buttons: List[Button] = []
        self.start_button: Optional[Button] = None
        self.slider: Optional[Slider] = None

    # ---------- State changes ----------
    def dispatch(self, intent: Intent) -> None:
        self._commit(apply_intent(self.state, intent, self.rng, self.cfg))

    def on_tick(self) -> TickResult:
        new, result = tick(self.state, self.rng, self.cfg)
        if result is TickResult.DIED:
            logger.info("Game over with score %d", new.score)
        self._commit(new)
        return result

    def _commit(self, new: GameState) -> None:
        old = self.state
        if new is old:
            return
        self.state = new
        if new.best > old.best:
            self.store.save(new.best)
        if new.phase is not old.phase:
            logger.info("%s -> %s", old.phase.value, new.phase.value)
        self.scheduler.sync(new)
        self.dirty = True

    # ---------- Input ----------
    def handle_event(self, event) -> bool:
        """Process one pygame event. Returns False to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == TICK_EVENT:
            # a tick queued just before the timer was cancelled is a no-op
            self.on_tick()
        elif event.type == pygame.KEYDOWN:
            intent = key_to_intent(event.key)
            if intent is not None:
                self.dispatch(intent)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
            self._handle_pointer(event)
        elif event.type in (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED):
            self.dirty = True
        return True

    def _handle_pointer(self, event) -> None:
        hovered = [b.hover for b in self._all_buttons()]
        if self.start_button is not None and self.state.is_idle:
            if self.start_button.handle_event(event):
                return
        for b in self.buttons:
            if b.handle_event(event):
                return
        if self.slider is not None:
            self.slider.handle_event(event)
        if hovered != [b.hover for b in self._all_buttons()]:
            self.dirty = True

    def _all_buttons(self) -> List[Button]:
        extra = [self.start_button] if self.start_button is not None else []
        return self.buttons + extra

    # ---------- Widgets ----------
    def build_widgets(self, fonts: Fonts) -> None:
        self.fonts = fonts
        x0 = CANVAS_SIZE + 20
        inner_w = PANEL_W - 40

        self.play_button = Button((x0, 140, 104, 38), "Play", fonts.body,
                                  lambda: self.dispatch(play_intent(self.state)))
        reset_button = Button((x0 + 116, 140, 104, 38), "Reset", fonts.body,
                              lambda: self.dispatch(Intent(RESET)))
        self.slider = Slider((x0 + 60, 210, inner_w - 60, 16),
                             SLIDER_MIN, SLIDER_MAX, SLIDER_STEP,
                             speed_to_slider(self.state.speed),
                             on_change=self._on_slider)

        pad, size = 8, 52
        cx = CANVAS_SIZE + PANEL_W // 2
        top = 250
        arrows = [
            Button((cx - size // 2, top, size, size), "^", fonts.big, lambda: self.dispatch(turn_to(UP))),
            Button((cx - size // 2 - size - pad, top + size + pad, size, size), "<", fonts.big,
                   lambda: self.dispatch(turn_to(LEFT))),
            Button((cx - size // 2, top + size + pad, size, size), "v", fonts.big,
                   lambda: self.dispatch(turn_to(DOWN))),
            Button((cx + size // 2 + pad, top + size + pad, size, size), ">", fonts.big,
                   lambda: self.dispatch(turn_to(RIGHT))),
        ]
        self.buttons = [self.play_button, reset_button] + arrows

        self.start_button = Button((CANVAS_SIZE // 2 - 90, CANVAS_SIZE // 2 - 28, 180, 56),
                                   "Start Game", fonts.big, lambda: self.dispatch(Intent(START)))

    def _on_slider(self, value: int) -> None:
        self.dispatch(Intent(SPEED, speed_ms=slider_to_speed(value)))

    def sync_widgets(self) -> None:
        """Bring labels and the slider in line with the current state."""
        if not self.buttons:
            return
        phase = self.state.phase
        if phase is Phase.RUNNING:
            self.play_button.text = "Pause"
        elif phase is Phase.GAME_OVER:
            self.play_button.text = "Restart"
        else:
            self.play_button.text = "Play"
        self.play_button.enabled = phase is not Phase.IDLE
        if self.slider is not None and not self.slider.dragging:
            self.slider.value = self.slider.clamp(speed_to_slider(self.state.speed))

    # ---------- Draw ----------
    def render(self, screen: pygame.Surface) -> None:
        self.sync_widgets()
        draw_frame(screen, self.fonts, self.state, widgets=[*self.buttons, self.slider],
                   start_button=self.start_button)
        self._draw_speed_label(screen)
        self.dirty = False

    def _draw_speed_label(self, screen: pygame.Surface) -> None:
        lab = self.fonts.small.render("SPEED", True, TEXT_DIM)
        screen.blit(lab, lab.get_rect(midleft=(CANVAS_SIZE + 20, self.slider.rect.centery)))

    def close(self) -> None:
        self.scheduler.cancel()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake with a glow.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--speed",
        type=int,
        default=CFG.initial_speed_ms,
        help="initial ms per tick (clamped to the slider range)",
    )
    parser.add_argument(
        "--best-file",
        type=Path,
        default=None,
        help="where the best score is kept (default: ~/.glowsnake/best_score.json)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    cfg = Config(seed=args.seed)
    cfg.initial_speed_ms = cfg.clamp_speed(args.speed)
    if args.best_file is not None:
        cfg.best_path = args.best_file
    return cfg


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = build_config(args)
    logger.info("Starting: speed=%dms seed=%s best_file=%s",
                cfg.initial_speed_ms, cfg.seed, cfg.best_path)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    app = SnakeApp(cfg)
    app.build_widgets(load_fonts())

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if not app.handle_event(event):
                    running = False
                    break
            # render on change only; ticks arrive as timer events
            if running and app.dirty:
                app.render(screen)
                pygame.display.flip()
            clock.tick(60)
    finally:
        app.close()
        pygame.quit()


if __name__ == "__main__":
    main()
