"""
Board module for Minesweeper game.

Implements the game board with mine placement, hint propagation,
marking and the win predicate.
"""
from dataclasses import dataclass, field
from typing import List, Tuple, Optional

import numpy as np

from .cell import Cell, CellContent


# ============================================================================
# Constants
# ============================================================================

BOARD_ROWS = 1000
BOARD_COLS = 1000

# Relative (dx, dy) offsets of the 8 cells around a cell
NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
    """

    rows: int = BOARD_ROWS
    cols: int = BOARD_COLS

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.rows * self.cols


DEFAULT_CONFIG = BoardConfig()


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, marking and the win
    predicate. Cells are addressed as (x, y) with x the column.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: Optional[int] = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mine_count: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._rng = np.random.default_rng(self.seed)
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]
        self._mine_count = 0

    def place_mines(self, count: int) -> int:
        """
        Place mines at uniformly random positions.

        Positions already holding a mine are drawn again, so the loop
        slows down as the board fills up but always places exactly
        ``min(count, rows * cols)`` mines.

        Args:
            count: Requested number of mines.

        Returns:
            Number of mines placed.
        """
        total = self.config.size
        to_place = min(max(count, 0), total - self._mine_count)
        placed = 0
        while placed < to_place:
            # Draw one batch per pass to keep generator overhead low
            for position in self._rng.integers(total, size=to_place - placed):
                if self._put_mine_at_position(int(position)):
                    placed += 1
        return placed

    def _put_mine_at_position(self, position: int) -> bool:
        """Place a mine at the n-th cell of the board."""
        y, x = divmod(position, self.config.cols)
        return self.place_mine_at(x, y)

    def place_mine_at(self, x: int, y: int) -> bool:
        """
        Place a single mine and update the hints around it.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            True if a mine was placed, False if out of bounds or
            already a mine.
        """
        if not self.is_valid_position(x, y):
            return False
        if not self._grid[y][x].place_mine():
            return False

        self._mine_count += 1
        for neighbor_x, neighbor_y in self.get_neighbors(x, y):
            self._grid[neighbor_y][neighbor_x].add_adjacent_mine()
        return True

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def get_neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column index of center cell.
            y: Row index of center cell.

        Returns:
            List of (x, y) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_x, delta_y in NEIGHBOR_OFFSETS:
            new_x = x + delta_x
            new_y = y + delta_y
            if self.is_valid_position(new_x, new_y):
                neighbors.append((new_x, new_y))
        return neighbors

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.cols and 0 <= y < self.config.rows

    # ========================================================================
    # Player Actions (Mid-level)
    # ========================================================================

    def toggle_mark(self, x: int, y: int) -> bool:
        """
        Toggle the mark on an unrevealed cell.

        Content is never touched, so mines, empty cells and hint cells
        all cycle between unmarked and marked the same way.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            True if the mark was toggled, False for out-of-bounds or
            revealed cells.
        """
        if not self.is_valid_position(x, y):
            return False
        return self._grid[y][x].toggle_mark()

    def is_won(self) -> bool:
        """
        Check the win predicate.

        The game is won when no mine is left unmarked and no empty cell
        is wrongly marked.
        """
        for row in self._grid:
            for cell in row:
                content = cell.content
                if content == CellContent.MINE and not cell.is_marked:
                    return False
                if content == CellContent.EMPTY and cell.is_marked:
                    return False
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def mine_count(self) -> int:
        """Number of mines on the board."""
        return self._mine_count

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self.config.rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self.config.cols

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(x, y):
            return None
        return self._grid[y][x]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array of shape (rows, cols) where:
                -1 = hidden
                -2 = marked
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for y, row in enumerate(self._grid):
            obs[y, :] = [cell.to_observation() for cell in row]
        return obs

    def reset(self) -> None:
        """Clear every mine, hint and mark."""
        self._init_grid()
