"""Application configuration model."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from launchgames.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".launchgames" / "config.json"

# Launchpad palette indices: red, orange, yellow, green, cyan, blue,
# purple, pink, white, grey. Only the first eight get a swatch.
DEFAULT_PALETTE: tuple[int, ...] = (5, 9, 13, 21, 37, 45, 53, 57, 3, 1)


def _check_palette_colors(colors) -> None:
    for color in colors:
        if not 0 <= color <= 127:
            raise ValueError("Colors must be palette indices between 0 and 127")


class AnimationConfig(BaseModel):
    """Timings for LED feedback sequences (seconds)."""

    scroll_interval: float = Field(default=0.12, ge=0.0, description="Delay between text frames")
    flash_repeats: int = Field(default=5, ge=1, description="On/off cycles of the win flash")
    flash_interval: float = Field(default=0.3, ge=0.0, description="Delay between flash phases")
    startup_pulse: float = Field(
        default=1.0, ge=0.0, description="How long the first pad pulses at startup (0 = off)"
    )


class TicTacToeConfig(BaseModel):
    """Tic-tac-toe presentation settings."""

    title: str = Field(default="TIC TAC TOE", description="Text scrolled on start")
    title_color: int = Field(default=53, ge=0, le=127, description="Palette color of the title")
    grid_color: int = Field(default=13, ge=0, le=127, description="Separator line color (yellow)")
    player_colors: tuple[int, int] = Field(
        default=(5, 45), description="Palette colors of player 1 and player 2"
    )

    @field_validator("player_colors")
    @classmethod
    def validate_player_colors(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Ensure both colors are valid palette indices."""
        _check_palette_colors(v)
        return v


class PixelPaintConfig(BaseModel):
    """Pixel paint settings."""

    palette: tuple[int, ...] = Field(
        default=DEFAULT_PALETTE, min_length=1, description="Swatch colors, bottom row first"
    )

    @field_validator("palette")
    @classmethod
    def validate_palette(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        _check_palette_colors(v)
        return v


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # MIDI settings
    port_pattern: str | None = Field(
        default=None,
        description="Substring of the MIDI port name to use (None = any Launchpad)",
    )
    model: Literal["x", "mini", "pro"] | None = Field(
        default=None,
        description="Launchpad model for the SysEx header (None = detect from port name)",
    )

    # Game selection
    games: list[str] = Field(
        default_factory=lambda: ["color_changer", "pixel_paint", "tictactoe"],
        min_length=1,
        description="Games in switching order",
    )
    start_game: str | None = Field(default=None, description="Game to start with")
    switch_game_pad: int = Field(
        default=19, description="Key of the side control pad that switches games"
    )

    animation: AnimationConfig = Field(default_factory=AnimationConfig)
    tictactoe: TicTacToeConfig = Field(default_factory=TicTacToeConfig)
    pixel_paint: PixelPaintConfig = Field(default_factory=PixelPaintConfig)

    @field_validator("switch_game_pad")
    @classmethod
    def validate_switch_pad(cls, v: int) -> int:
        """The switch pad must sit in the right-hand control column."""
        if v % 10 != 9 or not 1 <= v // 10 <= 8:
            raise ValueError("switch_game_pad must be a side control pad (19, 29, ..., 89)")
        return v

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return defaults.

        Args:
            path: Path to config file. If None, uses ~/.launchgames/config.json.

        Raises:
            ConfigFileInvalidError: If config file is empty or has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        if not path.exists():
            logger.info(f"No config file at {path}, using defaults")
            return cls()

        content = path.read_text()
        if not content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            config = cls.model_validate_json(content)
        except ValidationError as e:
            logger.error(f"Validation error loading config from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded config from {path}")
        return config

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        logger.info(f"Saved config to {path}")
