"""Data models for the pad games."""

from .config import AnimationConfig, AppConfig, PixelPaintConfig, TicTacToeConfig
from .enums import LightMode
from .pad import (
    GRID_SIZE,
    Pad,
    PadPosition,
    addressable_positions,
    grid_positions,
    pad_key,
)

__all__ = [
    "GRID_SIZE",
    "AnimationConfig",
    "AppConfig",
    "LightMode",
    "Pad",
    "PadPosition",
    "PixelPaintConfig",
    "TicTacToeConfig",
    "addressable_positions",
    "grid_positions",
    "pad_key",
]
