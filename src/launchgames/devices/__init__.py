"""Control surface adapter."""

from .launchpad import LaunchpadInput, LaunchpadModel, LaunchpadSurface
from .protocols import DeviceEvent, PadPressEvent, PadReleaseEvent, Surface

__all__ = [
    "DeviceEvent",
    "LaunchpadInput",
    "LaunchpadModel",
    "LaunchpadSurface",
    "PadPressEvent",
    "PadReleaseEvent",
    "Surface",
]
