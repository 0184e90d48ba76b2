"""Built-in games and the manager that switches between them."""

import logging

from launchgames.core.registry import PadRegistry
from launchgames.models import AppConfig

from .animations import Animator
from .base import Game
from .color_changer import ColorChanger
from .manager import GameManager
from .pixel_paint import PixelPaint
from .tictactoe import TicTacToe

logger = logging.getLogger(__name__)

GAME_TYPES: dict[str, type[Game]] = {
    ColorChanger.name: ColorChanger,
    PixelPaint.name: PixelPaint,
    TicTacToe.name: TicTacToe,
}


def build_games(config: AppConfig, registry: PadRegistry, animator: Animator) -> list[Game]:
    """
    Instantiate the configured games in order.

    Unknown names are logged and skipped.
    """
    games: list[Game] = []
    for name in config.games:
        if name == TicTacToe.name:
            games.append(TicTacToe(registry, animator, config.tictactoe, config.animation))
        elif name == PixelPaint.name:
            games.append(PixelPaint(registry, config.pixel_paint.palette))
        elif name in GAME_TYPES:
            games.append(GAME_TYPES[name](registry))
        else:
            logger.warning(f"Unknown game '{name}' in configuration, skipping")
    return games


__all__ = [
    "GAME_TYPES",
    "Animator",
    "ColorChanger",
    "Game",
    "GameManager",
    "PixelPaint",
    "TicTacToe",
    "build_games",
]
