"""CLI commands for launchgames."""

from .config import config
from .games import games
from .midi import midi_group

__all__ = ["config", "games", "midi_group"]
