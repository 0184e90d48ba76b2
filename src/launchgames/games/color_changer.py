"""Color changer: every press steps the pad through the palette."""

import logging

from launchgames.models import PadPosition

from .base import Game

logger = logging.getLogger(__name__)

COLOR_STEP = 4
COLOR_LIMIT = 128


class ColorChanger(Game):
    """Stateless per-pad color cycling; the registry holds each pad's color."""

    name = "color_changer"
    title = "Color Changer"

    def start(self) -> None:
        self.registry.clear_all()

    def handle_pad_press(self, position: PadPosition) -> None:
        current = self.registry.get(position.key).color
        # 124 steps to 128, which wraps to 0 on the next press
        new_color = current + COLOR_STEP if current < COLOR_LIMIT else 0
        self.registry.light(position, new_color)
        logger.debug(f"Pad {position}: color {current} -> {new_color}")
