"""Launchpad-specific device code."""

from .input import LaunchpadInput, key_to_position
from .model import LaunchpadModel
from .output import LaunchpadSurface

__all__ = [
    "LaunchpadInput",
    "LaunchpadModel",
    "LaunchpadSurface",
    "key_to_position",
]
