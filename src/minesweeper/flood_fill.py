"""
Flood fill reveal for Minesweeper.

Reveals the connected region of empty cells around a starting point and
the ring of hint cells bordering it. The pending coordinates live in an
explicit set instead of the call stack, so a region spanning the whole
board cannot exhaust the interpreter's recursion limit.
"""
from dataclasses import dataclass
from typing import Set, Tuple

from .board import Board
from .cell import Cell, CellContent


Position = Tuple[int, int]


# ============================================================================
# Result
# ============================================================================

@dataclass
class FloodFillResult:
    """
    Outcome of a single flood fill.

    Attributes:
        revealed: Number of cells newly revealed.
        visited: Number of distinct in-bounds coordinates processed.
    """

    revealed: int = 0
    visited: int = 0


# ============================================================================
# Cell Predicates
# ============================================================================

def _is_inside(cell: Cell) -> bool:
    """An unrevealed empty cell, marked or not, belongs to the region."""
    return cell.content == CellContent.EMPTY and not cell.is_revealed


def _is_border_hint(cell: Cell) -> bool:
    """An unrevealed hint cell on the edge of the region."""
    return cell.content == CellContent.HINT and not cell.is_revealed


# ============================================================================
# Flood Fill
# ============================================================================

def flood_fill(board: Board, x: int, y: int) -> FloodFillResult:
    """
    Reveal the empty region containing (x, y) and its hint border.

    Empty cells are revealed and their 8 neighbors queued. Hint cells
    are revealed but stop the fill. Mines are never touched. Marks on
    cells reached by the fill are cleared.

    Args:
        board: Board to reveal on.
        x: Starting column.
        y: Starting row.

    Returns:
        FloodFillResult with revealed and visited counts.
    """
    result = FloodFillResult()
    pending: Set[Position] = {(x, y)}
    visited: Set[Position] = set()

    while pending:
        position = pending.pop()
        cell = board.get_cell(*position)
        if cell is None or position in visited:
            continue
        visited.add(position)

        if _is_inside(cell):
            cell.reveal()
            result.revealed += 1
            for neighbor in board.get_neighbors(*position):
                if neighbor not in visited:
                    pending.add(neighbor)
        elif _is_border_hint(cell):
            cell.reveal()
            result.revealed += 1

    result.visited = len(visited)
    return result
