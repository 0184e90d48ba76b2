"""Timed LED sequences.

Animations run synchronously on the caller's thread. The dispatcher calls
games from a single worker thread, so presses that arrive while an
animation plays wait in its queue and two animations never draw at the
same time.
"""

import logging
import threading
import time
from typing import Callable, Iterable

from launchgames.core.registry import PadRegistry
from launchgames.models import GRID_SIZE, LightMode, PadPosition

from .glyphs import scroll_frames

logger = logging.getLogger(__name__)

DEFAULT_TEXT_TOP_ROW = 7


class Animator:
    """Plays frame sequences through the pad registry."""

    def __init__(self, registry: PadRegistry, sleep: Callable[[float], None] = time.sleep) -> None:
        """
        Initialize the animator.

        Args:
            registry: Pad registry every frame is written through
            sleep: Delay function between frames (tests pass a no-op)
        """
        self._registry = registry
        self._sleep = sleep
        self._stopped = threading.Event()

    def stop(self) -> None:
        """
        Abort running and future sequences at the next frame boundary.

        Safe to call from any thread; pads are left as the last frame drew them.
        """
        self._stopped.set()

    @property
    def stopped(self) -> bool:
        """True once `stop` has been called."""
        return self._stopped.is_set()

    def scroll_text(
        self,
        text: str,
        color: int,
        interval: float,
        top_row: int = DEFAULT_TEXT_TOP_ROW,
    ) -> None:
        """
        Scroll text right to left across the grid.

        Glyph rows are drawn from `top_row` downwards; only pads whose
        state changes between frames are written.
        """
        frames = scroll_frames(text, GRID_SIZE)
        logger.debug(f"Scrolling '{text}' ({len(frames)} frames)")

        for frame in frames:
            if self.stopped:
                logger.debug(f"Scroll of '{text}' cut short")
                return
            for x, column in enumerate(frame):
                for y, pixel in enumerate(column):
                    row = top_row - y
                    if not 1 <= row <= GRID_SIZE:
                        continue
                    self._draw(PadPosition(row=row, col=x + 1), pixel, color)
            self._sleep(interval)

    def flash(
        self,
        positions: Iterable[PadPosition],
        color: int,
        repeats: int,
        interval: float,
    ) -> None:
        """Alternate the given pads between color and off, ending off."""
        targets = list(positions)
        for _ in range(repeats):
            if self.stopped:
                return
            for position in targets:
                self._registry.light(position, color)
            self._sleep(interval)
            for position in targets:
                self._registry.turn_off(position)
            self._sleep(interval)

    def pulse(self, position: PadPosition, color: int, duration: float) -> None:
        """Pulse one pad for a while, then turn it off."""
        self._registry.light(position, color, LightMode.PULSING)
        self._sleep(duration)
        self._registry.turn_off(position)

    def _draw(self, position: PadPosition, on: bool, color: int) -> None:
        current = self._registry.get(position.key)
        if on:
            unchanged = (
                current.lit and current.color == color and current.light_mode == LightMode.PERMANENT
            )
            if not unchanged:
                self._registry.light(position, color)
        elif current.lit:
            self._registry.turn_off(position)
