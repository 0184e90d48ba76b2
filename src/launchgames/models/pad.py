"""Pad position and pad state models."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import LightMode

# Rows and columns are 1-indexed; 9 is the top row / right column of
# control buttons surrounding the 8x8 grid.
GRID_SIZE = 8
CONTROL_INDEX = 9
KEY_ROW_SPACING = 10


class PadPosition(BaseModel):
    """Physical position of a pad on the surface.

    Row 1 is the bottom row, column 1 the leftmost column. The key of a
    position (row * 10 + col) matches the note/CC number the Launchpad
    uses for that pad in programmer mode.
    """

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, le=9, description="Row (1-8 grid, 9 control)")
    col: int = Field(ge=0, le=9, description="Column (1-8 grid, 9 control)")

    @property
    def key(self) -> int:
        """Scalar identity used as the registry key."""
        return pad_key(self.row, self.col)

    @property
    def is_control(self) -> bool:
        """True for the top row and side column of control buttons."""
        return self.row >= CONTROL_INDEX or self.col >= CONTROL_INDEX

    @property
    def is_grid(self) -> bool:
        """True for the 8x8 playing grid."""
        return 1 <= self.row <= GRID_SIZE and 1 <= self.col <= GRID_SIZE

    @classmethod
    def from_key(cls, key: int) -> "PadPosition":
        """
        Decode a pad key back into a position.

        Args:
            key: Pad key (0-99)

        Raises:
            ValueError: If key is outside 0-99
        """
        if not 0 <= key <= 99:
            raise ValueError(f"Pad key must be 0-99, got {key}")
        return cls(row=key // KEY_ROW_SPACING, col=key % KEY_ROW_SPACING)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def pad_key(row: int, col: int) -> int:
    """Compute the pad key for a row/column pair."""
    return row * KEY_ROW_SPACING + col


def grid_positions() -> list[PadPosition]:
    """All positions of the 8x8 playing grid, bottom row first."""
    return [
        PadPosition(row=row, col=col)
        for row in range(1, GRID_SIZE + 1)
        for col in range(1, GRID_SIZE + 1)
    ]


def addressable_positions() -> list[PadPosition]:
    """Grid plus the top row and side column of control pads."""
    return [
        PadPosition(row=row, col=col)
        for row in range(1, CONTROL_INDEX + 1)
        for col in range(1, CONTROL_INDEX + 1)
    ]


class Pad(BaseModel):
    """Last known state of one pad."""

    model_config = ConfigDict(frozen=True)

    position: PadPosition
    # Wire range is 0-127; ColorChanger parks a pad at 128 before wrapping.
    color: int = Field(default=0, ge=0, le=255, description="Palette index")
    light_mode: LightMode = Field(default=LightMode.PERMANENT)
    lit: bool = Field(default=True, description="False for an 'off' write")

    @property
    def key(self) -> int:
        """Registry key of this pad."""
        return self.position.key

    @classmethod
    def on(cls, position: PadPosition, color: int, mode: LightMode = LightMode.PERMANENT) -> "Pad":
        """Create a lit pad."""
        return cls(position=position, color=color, light_mode=mode, lit=True)

    @classmethod
    def off(cls, position: PadPosition) -> "Pad":
        """Create an unlit pad."""
        return cls(position=position, color=0, light_mode=LightMode.PERMANENT, lit=False)
