"""Game manager: owns the game list and the active game."""

import logging
from typing import Optional

from launchgames.core.registry import PadRegistry
from launchgames.models import PadPosition

from .base import Game

logger = logging.getLogger(__name__)


class GameManager:
    """
    Keeps an ordered list of games and routes presses to the active one.

    States are "no game active" and "game i active"; switching always stops
    the previous game before starting the next, so at most one game is
    active at any time. Every operation on an empty list is a no-op.
    """

    def __init__(self, registry: PadRegistry) -> None:
        """
        Initialize the manager.

        Args:
            registry: Pad registry, used to clear the surface between games
        """
        self._registry = registry
        self._games: list[Game] = []
        self._index = 0
        self._active: Optional[Game] = None

    def add_game(self, game: Game) -> None:
        """Append a game to the switching order."""
        self._games.append(game)
        logger.debug(f"Added game {game.name} at position {len(self._games) - 1}")

    def select(self, name: str) -> bool:
        """
        Make the named game current, before the first start.

        Returns:
            True if a game with that name exists
        """
        for index, game in enumerate(self._games):
            if game.name == name:
                self._index = index
                return True
        logger.warning(f"Unknown game '{name}', keeping the current selection")
        return False

    def start_current(self) -> None:
        """Activate the current game if none is active yet."""
        if not self._games or self._active is not None:
            return

        self._active = self._games[self._index]
        logger.info(f"Starting {self._active.name}")
        self._active.start()

    def switch_to_next(self) -> None:
        """Stop the active game, clear the surface and start the next one."""
        if not self._games:
            return

        if self._active is not None:
            self._active.stop()

        self._index = (self._index + 1) % len(self._games)
        self._registry.clear_all()

        self._active = self._games[self._index]
        logger.info(f"Switched to {self._active.name}")
        self._active.start()

    def stop_current(self) -> None:
        """Stop the active game, leaving none active."""
        if self._active is None:
            return
        self._active.stop()
        self._active = None

    def dispatch(self, position: PadPosition) -> None:
        """Forward a press to the active game; dropped if none is active."""
        if self._active is None:
            logger.debug(f"No active game, dropping press at {position}")
            return
        self._active.handle_pad_press(position)

    @property
    def games(self) -> list[Game]:
        """Registered games in switching order."""
        return list(self._games)

    @property
    def current_index(self) -> int:
        """Index of the current game."""
        return self._index

    @property
    def active_game(self) -> Optional[Game]:
        """The running game, or None before the first start."""
        return self._active
