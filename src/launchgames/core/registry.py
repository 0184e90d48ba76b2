"""Pad registry: last known state of every pad that has been written."""

import logging
from threading import Lock

from launchgames.devices.protocols import Surface
from launchgames.models import LightMode, Pad, PadPosition, addressable_positions

logger = logging.getLogger(__name__)


class PadRegistry:
    """
    Source of truth for the current state of the surface.

    Every write goes through `set`, which stores the pad and emits exactly
    one surface command. Entries are created on first write and never
    removed; clearing a pad stores an "off" pad instead.
    """

    def __init__(self, surface: Surface) -> None:
        """
        Initialize the registry.

        Args:
            surface: LED surface that receives one command per write
        """
        self._surface = surface
        self._pads: dict[int, Pad] = {}
        self._lock = Lock()

    def set(self, pad: Pad) -> None:
        """Store a pad and mirror it on the surface."""
        with self._lock:
            self._pads[pad.key] = pad
            if pad.lit:
                self._surface.set_pad(pad.position, pad.color, pad.light_mode)
            else:
                self._surface.clear_pad(pad.position)

    def get(self, key: int) -> Pad:
        """
        Get the last stored pad for a key.

        Unknown keys return an unlit pad with color 0 in permanent mode.
        """
        with self._lock:
            pad = self._pads.get(key)
        if pad is None:
            return Pad.off(PadPosition.from_key(key))
        return pad

    def light(self, position: PadPosition, color: int, mode: LightMode = LightMode.PERMANENT) -> None:
        """Shorthand for setting a lit pad."""
        self.set(Pad.on(position, color, mode))

    def turn_off(self, position: PadPosition) -> None:
        """Shorthand for setting an unlit pad."""
        self.set(Pad.off(position))

    def clear_all(self) -> None:
        """Write an off pad to every addressable position."""
        for position in addressable_positions():
            self.turn_off(position)
        logger.debug("Cleared surface")

    def snapshot(self) -> dict[int, Pad]:
        """Copy of the current key -> pad map."""
        with self._lock:
            return dict(self._pads)
