"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, Game


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def small_config() -> BoardConfig:
    """A 3x3 board configuration."""
    return BoardConfig(rows=3, cols=3)


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for flood fill testing."""
    return Board(BoardConfig(rows=5, cols=5), seed=0)


@pytest.fixture
def center_mine_board(small_config: BoardConfig) -> Board:
    """Create a 3x3 board with a single mine in the middle."""
    board = Board(small_config, seed=0)
    board.place_mine_at(1, 1)
    return board


@pytest.fixture
def seeded_board() -> Board:
    """Create a 10x8 board with 12 mines from a fixed seed."""
    board = Board(BoardConfig(rows=8, cols=10), seed=42)
    board.place_mines(12)
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def hint_cell() -> Cell:
    """Create a hidden cell with adjacent mines."""
    return Cell(adjacent_mines=3)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def center_mine_game(small_config: BoardConfig) -> Game:
    """Create a 3x3 game with a single mine in the middle."""
    game = Game(small_config, seed=0)
    game.board.place_mine_at(1, 1)
    return game


@pytest.fixture
def corridor_game() -> Game:
    """
    Create a 5x3 game with a column of mines at x=2.

    The left and right halves are separate regions:

        /2*2/
        /3*3/
        /2*2/
    """
    game = Game(BoardConfig(rows=3, cols=5), seed=0)
    for y in range(3):
        game.board.place_mine_at(2, y)
    return game
