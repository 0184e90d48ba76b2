"""Enumerations for the pad games."""

from enum import Enum


class LightMode(int, Enum):
    """LED light modes.

    The value doubles as the MIDI channel the Launchpad listens on for that
    mode while in programmer mode.
    """

    PERMANENT = 0  # Steady color
    BLINKING = 1  # Flash between off and color
    PULSING = 2  # Breathe the color

    @property
    def channel(self) -> int:
        """MIDI channel used to request this mode."""
        return self.value
