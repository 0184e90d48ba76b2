"""MIDI device exceptions."""

from typing import Optional

from .base import LaunchGamesError


class DeviceError(LaunchGamesError):
    """The control surface cannot be used."""
    pass


class DeviceNotFoundError(DeviceError):
    """No MIDI port matching the control surface was found."""

    def __init__(self, pattern: Optional[str], available_ports: list[str]):
        """
        Initialize device not found error.

        Args:
            pattern: Port name pattern that was searched for (None = any Launchpad)
            available_ports: Port names that were present
        """
        target = f"matching '{pattern}'" if pattern else "for a Launchpad"
        recovery = "Check that the Launchpad is plugged in and not used by another program."
        recovery += "\nRun 'launchgames midi list' to see the available MIDI ports"
        if pattern:
            recovery += "\nor change the --port pattern"

        super().__init__(
            user_message=f"No MIDI device found {target}",
            technical_message=(
                f"No MIDI port {target}; available: {', '.join(available_ports) or 'none'}"
            ),
            recovery_hint=recovery,
        )
        self.pattern = pattern
        self.available_ports = available_ports
