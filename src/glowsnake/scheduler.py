# scheduler.py
from typing import Callable, Optional
import logging

import pygame  # type: ignore

from .game import GameState

logger = logging.getLogger(__name__)

# pygame posts this event every `speed` ms while the game runs
TICK_EVENT = pygame.USEREVENT + 1


class TickScheduler:
    """
    Owns the single repeating timer that drives ``tick``.

    ``sync`` is called after every state change: the timer is armed with the
    current speed while the game runs and cancelled otherwise. pygame replaces
    an existing timer for the same event type, so re-arming restarts the wait
    and never leaves two timers firing.
    """

    def __init__(
        self,
        event_type: int = TICK_EVENT,
        set_timer: Optional[Callable[[int, int], None]] = None,
    ):
        self.event_type = event_type
        self._set_timer = set_timer or pygame.time.set_timer
        self._armed: Optional[int] = None   # interval in ms, None when stopped

    @property
    def interval(self) -> Optional[int]:
        return self._armed

    def sync(self, state: GameState) -> None:
        want: Optional[int] = None
        if state.running and not state.game_over:
            want = max(1, int(state.speed))
        if want == self._armed:
            return
        if want is None:
            self.cancel()
        else:
            self._arm(want)

    def _arm(self, interval_ms: int) -> None:
        self._set_timer(self.event_type, interval_ms)
        logger.debug("Tick timer armed at %d ms", interval_ms)
        self._armed = interval_ms

    def cancel(self) -> None:
        if self._armed is None:
            return
        self._set_timer(self.event_type, 0)
        logger.debug("Tick timer cancelled")
        self._armed = None

