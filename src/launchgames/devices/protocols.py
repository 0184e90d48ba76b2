"""Surface protocol and device events."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from launchgames.models import LightMode, PadPosition


class DeviceEvent:
    """Generic device event (input from hardware)."""

    pass


class PadPressEvent(DeviceEvent):
    """Pad was pressed."""

    def __init__(self, position: PadPosition, velocity: int = 127):
        self.position = position
        self.velocity = velocity

    def __repr__(self) -> str:
        return f"PadPressEvent({self.position}, velocity={self.velocity})"


class PadReleaseEvent(DeviceEvent):
    """Pad was released."""

    def __init__(self, position: PadPosition):
        self.position = position

    def __repr__(self) -> str:
        return f"PadReleaseEvent({self.position})"


class DeviceInput(Protocol):
    """Protocol for device input handling."""

    def parse_message(self, msg) -> DeviceEvent | None:
        """
        Parse incoming message into device event.

        Must translate hardware note/CC numbers into pad positions.
        """
        ...


class Surface(Protocol):
    """LED surface the games draw on.

    Writes are fire-and-forget: implementations log failures and never raise.
    """

    def set_pad(self, position: PadPosition, color: int, mode: LightMode) -> None:
        """
        Light one pad.

        Args:
            position: Pad position (grid or control)
            color: Palette color index
            mode: Permanent, blinking or pulsing
        """
        ...

    def clear_pad(self, position: PadPosition) -> None:
        """Turn one pad off."""
        ...

    def clear_all(self) -> None:
        """Turn every pad off."""
        ...
