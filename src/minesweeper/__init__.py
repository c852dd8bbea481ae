"""
Minesweeper game module.

Provides core game logic including board management, cell state,
the flood fill reveal and the game controller.
"""
from .cell import Cell, CellContent, CellState
from .board import Board, BoardConfig, BOARD_ROWS, BOARD_COLS, DEFAULT_CONFIG
from .flood_fill import FloodFillResult, flood_fill
from .game import Game, GameState
from .renderer import render_board

__all__ = [
    "Cell",
    "CellContent",
    "CellState",
    "Board",
    "BoardConfig",
    "BOARD_ROWS",
    "BOARD_COLS",
    "DEFAULT_CONFIG",
    "FloodFillResult",
    "flood_fill",
    "Game",
    "GameState",
    "render_board",
]
