"""Launchpad model detection and SysEx handshake."""

from enum import Enum
from typing import Optional

import mido

PROGRAMMER_MODE_COMMAND = 0x0E


class LaunchpadModel(Enum):
    """Launchpad hardware models."""
    X = "x"
    MINI_MK3 = "mini"
    PRO_MK3 = "pro"

    @property
    def sysex_header(self) -> list[int]:
        """Get SysEx header for this model (excluding F0)."""
        return {
            LaunchpadModel.X: [0x00, 0x20, 0x29, 0x02, 0x0C],
            LaunchpadModel.MINI_MK3: [0x00, 0x20, 0x29, 0x02, 0x0D],
            LaunchpadModel.PRO_MK3: [0x00, 0x20, 0x29, 0x02, 0x0E],
        }[self]

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return {
            LaunchpadModel.X: "Launchpad X",
            LaunchpadModel.MINI_MK3: "Launchpad Mini MK3",
            LaunchpadModel.PRO_MK3: "Launchpad Pro MK3",
        }[self]

    def programmer_mode(self, enable: bool) -> mido.Message:
        """
        Build the programmer mode toggle message.

        This is the one-time handshake sent before any pad is lit; it puts
        the device into the layout where pad key == note number.
        """
        data = [*self.sysex_header, PROGRAMMER_MODE_COMMAND, 1 if enable else 0]
        return mido.Message("sysex", data=data)

    @classmethod
    def detect(cls, port_name: str) -> Optional["LaunchpadModel"]:
        """
        Detect Launchpad model from MIDI port name.

        Args:
            port_name: MIDI port name string

        Returns:
            Detected LaunchpadModel or None if not recognized
        """
        port_upper = port_name.upper()
        is_launchpad = "LAUNCHPAD" in port_upper

        if "LPMINIMK3" in port_upper or (is_launchpad and "MINI" in port_upper):
            return cls.MINI_MK3
        elif "LPPROMK3" in port_upper or (is_launchpad and "PRO" in port_upper):
            return cls.PRO_MK3
        elif "LPX" in port_upper or is_launchpad:
            # Generic "Launchpad" ports are treated as an X
            return cls.X

        return None
