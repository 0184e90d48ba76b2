"""Game contract."""

import logging
from abc import ABC, abstractmethod

from launchgames.core.registry import PadRegistry
from launchgames.models import PadPosition

logger = logging.getLogger(__name__)


class Game(ABC):
    """
    Base class for the built-in games.

    A game draws through the pad registry and reacts to pad presses routed
    to it by the GameManager. Only one game is active at a time.
    """

    #: Identifier used in configuration and on the command line
    name: str = "game"

    #: Human-readable title
    title: str = "Game"

    def __init__(self, registry: PadRegistry) -> None:
        self.registry = registry

    @abstractmethod
    def start(self) -> None:
        """Reset state and draw the initial screen."""

    def stop(self) -> None:
        """Called when the game is switched away from."""
        logger.debug(f"Stopped {self.name}")

    @abstractmethod
    def handle_pad_press(self, position: PadPosition) -> None:
        """React to a pad press on the playing surface."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
