"""Pixel paint: pick a color from the left column, paint the rest."""

import logging

from launchgames.core.registry import PadRegistry
from launchgames.models import GRID_SIZE, LightMode, PadPosition
from launchgames.models.config import DEFAULT_PALETTE

from .base import Game

logger = logging.getLogger(__name__)

PALETTE = DEFAULT_PALETTE

SWATCH_COLUMN = 1


class PixelPaint(Game):
    """
    Palette selection plus painting.

    The swatches occupy column 1, rows 1-8 (row r shows PALETTE[r - 1]);
    the selected swatch pulses. Any other press paints the selected color.
    """

    name = "pixel_paint"
    title = "Pixel Paint"

    def __init__(self, registry: PadRegistry, palette: tuple[int, ...] = PALETTE) -> None:
        super().__init__(registry)
        self.palette = palette
        self.selected = 0

    @property
    def current_color(self) -> int:
        """Palette color painted by the next stroke."""
        return self.palette[self.selected]

    def start(self) -> None:
        self._render_swatches()

    def handle_pad_press(self, position: PadPosition) -> None:
        if position.col == SWATCH_COLUMN and 1 <= position.row <= GRID_SIZE:
            self._select(position.row - 1)
            return

        self.registry.light(position, self.current_color)

    def _select(self, index: int) -> None:
        if index >= len(self.palette):
            return
        self.selected = index
        logger.debug(f"Selected color {self.current_color} (swatch {index + 1})")
        self._render_swatches()

    def _render_swatches(self) -> None:
        for index, color in enumerate(self.palette[:GRID_SIZE]):
            mode = LightMode.PULSING if index == self.selected else LightMode.PERMANENT
            self.registry.light(PadPosition(row=index + 1, col=SWATCH_COLUMN), color, mode)
