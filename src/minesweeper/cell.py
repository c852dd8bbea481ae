"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their content
(empty/mine/hint) and visibility state (hidden/revealed/marked).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    MARKED = auto()


class CellContent(Enum):
    """What a cell holds underneath."""

    EMPTY = auto()
    MINE = auto()
    HINT = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Marked and revealed share one ``state`` field, so a cell can never be
    both at once.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Always 0 for a mine.
        state: Current visual state (hidden, revealed, or marked).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    @property
    def content(self) -> CellContent:
        """Get the content facet of this cell."""
        if self.is_mine:
            return CellContent.MINE
        if self.adjacent_mines > 0:
            return CellContent.HINT
        return CellContent.EMPTY

    def place_mine(self) -> bool:
        """
        Turn this cell into a mine.

        Returns:
            True if a mine was placed, False if the cell already held one.
        """
        if self.is_mine:
            return False
        self.is_mine = True
        self.adjacent_mines = 0
        return True

    def add_adjacent_mine(self) -> None:
        """Count one more neighboring mine. Mines carry no hint."""
        if not self.is_mine:
            self.adjacent_mines += 1

    def reveal(self) -> bool:
        """
        Reveal this cell, dropping any mark.

        Returns:
            True if cell was revealed, False if it already was.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_mark(self) -> bool:
        """
        Toggle mark on this cell.

        Returns:
            True if mark was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.MARKED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_marked(self) -> bool:
        """Check if cell is marked."""
        return self.state == CellState.MARKED

    def to_observation(self) -> int:
        """
        Convert cell to an integer view of what the player sees.

        Returns:
            -1: Hidden cell
            -2: Marked cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.MARKED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
