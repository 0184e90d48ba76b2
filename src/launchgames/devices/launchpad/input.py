"""Launchpad input parsing."""

import logging
from typing import Optional

import mido

from launchgames.devices.protocols import DeviceEvent, DeviceInput, PadPressEvent, PadReleaseEvent
from launchgames.models import PadPosition

logger = logging.getLogger(__name__)


def key_to_position(key: int) -> Optional[PadPosition]:
    """
    Convert a programmer-mode note/CC number to a pad position.

    Returns None for numbers that don't address a pad (row or column 0,
    or anything above 99).
    """
    if not 11 <= key <= 99:
        return None
    position = PadPosition.from_key(key)
    if position.row == 0 or position.col == 0:
        return None
    return position


class LaunchpadInput(DeviceInput):
    """Parse Launchpad MIDI input into device events."""

    def parse_message(self, msg: mido.Message) -> Optional[DeviceEvent]:
        """
        Parse incoming MIDI message into pad events.

        Grid pads arrive as notes, the top row and side column as control
        changes. A note_on with velocity 0 (or a CC with value 0) is a release.

        Args:
            msg: MIDI message

        Returns:
            DeviceEvent with the pad position, or None
        """
        if msg.type == "note_on":
            position = key_to_position(msg.note)
            if position is None:
                return None
            if msg.velocity > 0:
                return PadPressEvent(position, msg.velocity)
            return PadReleaseEvent(position)

        elif msg.type == "note_off":
            position = key_to_position(msg.note)
            if position is None:
                return None
            return PadReleaseEvent(position)

        elif msg.type == "control_change":
            position = key_to_position(msg.control)
            if position is None:
                logger.debug(f"Ignoring control change {msg.control}")
                return None
            if msg.value > 0:
                return PadPressEvent(position, msg.value)
            return PadReleaseEvent(position)

        # Clock, sysex replies, aftertouch
        return None
