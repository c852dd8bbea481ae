"""
Text rendering for the Minesweeper board.

Cell symbols:
    /   revealed empty cell
    *   marked cell (any content)
    1-8 revealed hint cell (count mod 10)
    .   anything still hidden

Column and row labels are 1-based.
"""
from typing import List

import numpy as np

from .board import Board


def cell_symbols(observation: np.ndarray) -> np.ndarray:
    """
    Map a board observation to one display character per cell.

    Args:
        observation: Array produced by ``Board.get_observation``.

    Returns:
        Array of single-character strings with the same shape.
    """
    symbols = np.full(observation.shape, ".", dtype="<U1")
    hints = (observation > 0) & (observation < 9)
    symbols[hints] = (observation[hints] % 10).astype(str)
    symbols[observation == 0] = "/"
    symbols[observation == -2] = "*"
    return symbols


def _tens_header(cols: int) -> str:
    """Tens labels written above every tenth column."""
    header = []
    skip = 0
    for x in range(cols):
        label = x + 1
        if label % 10 == 0:
            tens = str(label // 10)
            header.append(tens)
            # Multi-digit labels spill over the following columns
            skip = len(tens) - 1
        elif skip > 0:
            skip -= 1
        else:
            header.append(" ")
    return "".join(header)


def render_board(board: Board) -> str:
    """
    Render the board with column headers and row labels.

    Args:
        board: Board to render.

    Returns:
        Multi-line string ready to print.
    """
    rows, cols = board.rows, board.cols
    label_width = len(str(rows))
    prefix = " " * label_width + "|"
    divider = "-" * label_width + "|" + "-" * cols + "|"

    lines: List[str] = []
    if cols > 9:
        lines.append(prefix + _tens_header(cols) + "|")
    lines.append(prefix + "".join(str((x + 1) % 10) for x in range(cols)) + "|")
    lines.append(divider)

    symbols = cell_symbols(board.get_observation())
    for y in range(rows):
        lines.append(f"{y + 1:>{label_width}}|" + "".join(symbols[y]) + "|")

    lines.append(divider)
    return "\n".join(lines)
