"""
Game controller for Minesweeper.

Owns the board and drives the state machine: setup, marking,
revealing, and win/loss detection.
"""
from enum import Enum, auto
from typing import Optional

from .board import Board, BoardConfig, DEFAULT_CONFIG
from .cell import CellContent
from .flood_fill import flood_fill
from .renderer import render_board


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single game of Minesweeper.

    Invalid coordinates are ignored without raising. Stepping on a mine
    is a normal ending (LOST), not an error. The win predicate is only
    checked after a reveal, never after a mark.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the game.

        Args:
            config: Board configuration (default: 1000x1000).
            seed: Random seed for mine placement.
        """
        self.config = config or DEFAULT_CONFIG
        self.board = Board(self.config, seed=seed)
        self._state = GameState.IN_PROGRESS

    def setup(self, mine_count: int) -> int:
        """
        Place the requested number of mines.

        Args:
            mine_count: Requested mines, clamped to [0, rows * cols].

        Returns:
            Number of mines placed.
        """
        count = min(max(mine_count, 0), self.config.size)
        return self.board.place_mines(count)

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, x: int, y: int) -> GameState:
        """
        Claim a cell as free.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            Game state after the move.
        """
        if self.is_over:
            return self._state

        cell = self.board.get_cell(x, y)
        if cell is None:
            return self._state

        if cell.content == CellContent.MINE:
            self._state = GameState.LOST
            return self._state

        flood_fill(self.board, x, y)
        if self.board.is_won():
            self._state = GameState.WON
        return self._state

    def mark(self, x: int, y: int) -> GameState:
        """
        Set or unset a mine mark on a cell.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            Game state, which marking never changes.
        """
        if not self.is_over:
            self.board.toggle_mark(x, y)
        return self._state

    def play(self, x: int, y: int, mark: bool = False) -> GameState:
        """Apply one turn: a mark toggle or a reveal."""
        if mark:
            return self.mark(x, y)
        return self.reveal(x, y)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_over(self) -> bool:
        """Check if the game reached a terminal state."""
        return self._state != GameState.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state == GameState.LOST

    def render(self) -> str:
        """Render the board as text for the terminal."""
        return render_board(self.board)
