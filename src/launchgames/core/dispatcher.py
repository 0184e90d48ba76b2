"""Serialized pad-event dispatch."""

from __future__ import annotations

import logging
import threading
from queue import Queue
from typing import TYPE_CHECKING, Optional

from launchgames.devices.protocols import DeviceEvent, PadPressEvent, PadReleaseEvent
from launchgames.models import PadPosition

if TYPE_CHECKING:
    from launchgames.games.manager import GameManager

logger = logging.getLogger(__name__)

CONTROL_COLUMN = 9
DEFAULT_SWITCH_PAD = 19

_STOP = object()


class PadDispatcher:
    """
    Single consumer between the MIDI callback thread and the games.

    Events are queued by `submit` and handled one at a time on a worker
    thread, so game state and the pad registry are only ever touched from
    that thread. A game's animation blocks the worker; presses made in the
    meantime are handled once it finishes.
    """

    def __init__(self, manager: GameManager, switch_pad: int = DEFAULT_SWITCH_PAD) -> None:
        """
        Initialize dispatcher.

        Args:
            manager: Game manager receiving routed presses
            switch_pad: Key of the control pad that switches to the next game
        """
        self._manager = manager
        self._switch_pad = switch_pad
        self._queue: Queue = Queue()
        self._held: set[int] = set()
        self._worker: Optional[threading.Thread] = None
        self._running = False

    def start(self) -> None:
        """Start the worker thread."""
        if self._running:
            logger.warning("PadDispatcher is already running")
            return

        self._running = True
        self._worker = threading.Thread(target=self._run, name="pad-dispatcher", daemon=True)
        self._worker.start()
        logger.debug("PadDispatcher started")

    def stop(self, timeout: Optional[float] = 2.0) -> None:
        """
        Stop the worker after the events already queued.

        Args:
            timeout: Seconds to wait for the worker, or None to wait until it exits
        """
        if not self._running:
            return

        self._running = False
        self._queue.put(_STOP)
        if self._worker and self._worker.is_alive():
            self._worker.join(timeout=timeout)
            if self._worker.is_alive():
                logger.warning("PadDispatcher worker did not stop in time")
        self._worker = None
        logger.debug("PadDispatcher stopped")

    def submit(self, event: DeviceEvent) -> None:
        """Queue an event. Safe to call from any thread."""
        self._queue.put(event)

    def process(self, event: DeviceEvent) -> None:
        """Handle one event synchronously."""
        if isinstance(event, PadReleaseEvent):
            self._held.discard(event.position.key)
            return

        if not isinstance(event, PadPressEvent):
            logger.debug(f"Ignoring event {event!r}")
            return

        key = event.position.key
        if event.velocity == 0:
            self._held.discard(key)
            return

        # Repeated note-on without a release in between
        if key in self._held:
            logger.debug(f"Pad {event.position} already held")
            return
        self._held.add(key)

        self.route(event.position)

    def route(self, position: PadPosition) -> None:
        """Apply the control-pad rules, then hand the press to the manager."""
        if position.key == self._switch_pad:
            self._manager.switch_to_next()
            return

        if position.col == CONTROL_COLUMN:
            logger.info(f"Control pad {position} has no action")
            return

        self._manager.dispatch(position)

    def _run(self) -> None:
        while True:
            event = self._queue.get()
            if event is _STOP:
                break
            try:
                self.process(event)
            except Exception:
                logger.exception(f"Error handling {event!r}")

    @property
    def held_pads(self) -> set[int]:
        """Keys of pads currently held down."""
        return set(self._held)

    @property
    def is_running(self) -> bool:
        """Check if the worker thread is running."""
        return self._running
