"""Launchpad LED output."""

import logging
from typing import Callable

import mido

from launchgames.devices.protocols import Surface
from launchgames.models import LightMode, PadPosition, addressable_positions

from .model import LaunchpadModel

logger = logging.getLogger(__name__)

# MIDI data bytes are 7-bit
DATA_MASK = 0x7F


class LaunchpadSurface(Surface):
    """
    Drive Launchpad LEDs in programmer mode.

    Grid pads are addressed with note messages and control pads (top row,
    side column) with control changes; in both cases the note/CC number is
    the pad key and the MIDI channel selects the light mode.
    """

    def __init__(self, send: Callable[[mido.Message], bool], model: LaunchpadModel):
        """
        Initialize Launchpad surface.

        Args:
            send: Function that sends a MIDI message, returning False on failure
            model: Launchpad model (selects the SysEx header)
        """
        self._send = send
        self.model = model
        self._initialized = False

    def initialize(self) -> None:
        """Enter programmer mode."""
        if self._initialized:
            logger.warning("LaunchpadSurface already initialized")
            return

        if self._send(self.model.programmer_mode(enable=True)):
            logger.info(f"Entered programmer mode ({self.model.display_name})")
            self._initialized = True
        else:
            logger.error("Failed to enter programmer mode")

    def shutdown(self) -> None:
        """Clear LEDs and exit programmer mode."""
        if not self._initialized:
            return

        self.clear_all()

        if self._send(self.model.programmer_mode(enable=False)):
            logger.info("Exited programmer mode")
            self._initialized = False
        else:
            logger.error("Failed to exit programmer mode")

    def set_pad(self, position: PadPosition, color: int, mode: LightMode) -> None:
        """Light one pad with a palette color."""
        value = color & DATA_MASK
        if position.is_control:
            msg = mido.Message(
                "control_change", channel=mode.channel, control=position.key, value=value
            )
        else:
            msg = mido.Message("note_on", channel=mode.channel, note=position.key, velocity=value)

        if not self._send(msg):
            logger.warning(f"Failed to set pad {position} (key {position.key})")

    def clear_pad(self, position: PadPosition) -> None:
        """Turn one pad off."""
        if position.is_control:
            msg = mido.Message("control_change", channel=0, control=position.key, value=0)
        else:
            msg = mido.Message("note_off", channel=0, note=position.key)

        if not self._send(msg):
            logger.warning(f"Failed to clear pad {position} (key {position.key})")

    def clear_all(self) -> None:
        """Turn off the grid and all control pads."""
        for position in addressable_positions():
            self.clear_pad(position)
        logger.debug("Cleared all pads")
