"""Two-player tic-tac-toe with a rolling seven-move history.

The 8x8 grid is split by two yellow lines in each direction (physical rows
and columns 3 and 6) into nine 2x2 cells. Each player may only have the
most recent moves on the board: once seven marks are down, placing another
removes the oldest one first. With at most seven marks on nine cells the
board can never fill up, so there is no draw.
"""

import logging
from typing import NamedTuple, Optional

from launchgames.core.registry import PadRegistry
from launchgames.models import (
    AnimationConfig,
    LightMode,
    PadPosition,
    TicTacToeConfig,
    grid_positions,
)

from .animations import Animator
from .base import Game

logger = logging.getLogger(__name__)

BOARD_SIZE = 3
MAX_MOVES = 7
EMPTY = 0

# Physical rows are inverted so logical row 0 is the top of the surface.
ROW_BANDS: dict[int, tuple[int, int]] = {0: (7, 8), 1: (4, 5), 2: (1, 2)}
COL_BANDS: dict[int, tuple[int, int]] = {0: (1, 2), 1: (4, 5), 2: (7, 8)}
SEPARATORS = (3, 6)

Board = list[list[int]]


class Move(NamedTuple):
    """One placed mark."""
    row: int
    col: int
    player: int


def _band_index(bands: dict[int, tuple[int, int]], value: int) -> Optional[int]:
    for index, band in bands.items():
        if value in band:
            return index
    return None


def map_position(position: PadPosition) -> Optional[tuple[int, int]]:
    """
    Map a physical pad to a logical (row, col) cell.

    Returns None for separator lines and anything outside the 8x8 grid.
    """
    if not position.is_grid:
        return None
    row = _band_index(ROW_BANDS, position.row)
    col = _band_index(COL_BANDS, position.col)
    if row is None or col is None:
        return None
    return row, col


def cell_pads(row: int, col: int) -> list[PadPosition]:
    """The four physical pads of a logical cell."""
    return [
        PadPosition(row=pad_row, col=pad_col)
        for pad_row in ROW_BANDS[row]
        for pad_col in COL_BANDS[col]
    ]


def separator_pads() -> list[PadPosition]:
    """Pads forming the two horizontal and two vertical grid lines."""
    return [
        position
        for position in grid_positions()
        if position.row in SEPARATORS or position.col in SEPARATORS
    ]


def check_winner(board: Board, player: int) -> bool:
    """True if player owns a full row, column or diagonal."""
    for i in range(BOARD_SIZE):
        if all(board[i][j] == player for j in range(BOARD_SIZE)):
            return True
        if all(board[j][i] == player for j in range(BOARD_SIZE)):
            return True
    if all(board[i][i] == player for i in range(BOARD_SIZE)):
        return True
    return all(board[i][BOARD_SIZE - 1 - i] == player for i in range(BOARD_SIZE))


def empty_board() -> Board:
    """A fresh 3x3 board."""
    return [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


class TicTacToe(Game):
    """
    Turn-based tic-tac-toe on the pad grid.

    Playing -> GameOver on a win; the next press after that restarts.
    The board is the state of record for both win detection and eviction;
    the move history only remembers which mark is oldest.
    """

    name = "tictactoe"
    title = "Tic Tac Toe"

    def __init__(
        self,
        registry: PadRegistry,
        animator: Animator,
        config: Optional[TicTacToeConfig] = None,
        animation: Optional[AnimationConfig] = None,
    ) -> None:
        super().__init__(registry)
        self.animator = animator
        self.config = config or TicTacToeConfig()
        self.animation = animation or AnimationConfig()

        self.board: Board = empty_board()
        self.current_player = 1
        self.game_over = False
        self.winner: Optional[int] = None
        self.history: list[Move] = []

    def start(self) -> None:
        self.board = empty_board()
        self.current_player = 1
        self.game_over = False
        self.winner = None
        self.history = []

        self.registry.clear_all()
        self.animator.scroll_text(
            self.config.title, self.config.title_color, self.animation.scroll_interval
        )
        self.draw_grid_lines()
        logger.info("Tic-tac-toe started, player 1 to move")

    def handle_pad_press(self, position: PadPosition) -> None:
        if self.game_over:
            self.start()
            return

        cell = map_position(position)
        if cell is None:
            logger.debug(f"Ignoring press on {position}")
            return

        row, col = cell
        if self.board[row][col] != EMPTY:
            logger.debug(f"Cell ({row},{col}) already taken")
            return

        if len(self.history) >= MAX_MOVES:
            self._evict_oldest()

        player = self.current_player
        self.history.append(Move(row, col, player))
        self.board[row][col] = player
        self._draw_cell(row, col, self.player_color(player), LightMode.PULSING)
        logger.debug(f"Player {player} took ({row},{col}), {len(self.history)} marks down")

        if check_winner(self.board, player):
            self.game_over = True
            self.winner = player
            logger.info(f"Player {player} wins")
            self._show_win(player)
            return

        self.current_player = 2 if player == 1 else 1

    def player_color(self, player: int) -> int:
        """Palette color of a player's marks."""
        return self.config.player_colors[player - 1]

    def draw_grid_lines(self) -> None:
        """Draw the separator lines."""
        for position in separator_pads():
            self.registry.light(position, self.config.grid_color)

    @property
    def mark_count(self) -> int:
        """Number of marks currently on the board."""
        return sum(1 for row in self.board for owner in row if owner != EMPTY)

    def _evict_oldest(self) -> None:
        oldest = self.history.pop(0)
        self.board[oldest.row][oldest.col] = EMPTY
        for position in cell_pads(oldest.row, oldest.col):
            self.registry.turn_off(position)
        self.draw_grid_lines()
        logger.debug(f"Evicted player {oldest.player}'s mark at ({oldest.row},{oldest.col})")

    def _draw_cell(self, row: int, col: int, color: int, mode: LightMode) -> None:
        for position in cell_pads(row, col):
            self.registry.light(position, color, mode)

    def _show_win(self, player: int) -> None:
        self.animator.flash(
            grid_positions(),
            self.player_color(player),
            self.animation.flash_repeats,
            self.animation.flash_interval,
        )
