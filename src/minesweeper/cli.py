"""
Terminal front end for Minesweeper.

Reads the mine count and player turns, validates them, and prints the
board after every move. Turns are typed as ``col row`` to claim a cell
as free, or ``col row mine`` to set/unset a mine mark. Coordinates are
1-based.
"""
import argparse
from dataclasses import dataclass
from typing import Callable, List, Optional

from .game import Game, GameState


MINES_PROMPT = "How many mines do you want on the field? "
TURN_PROMPT = "Set/unset mine marks or claim a cell as free: "
TURN_USAGE = "Enter a column and a row, optionally followed by 'mine'."

LOST_MESSAGE = "You stepped on a mine and failed!"
WON_MESSAGE = "Congratulations! You found all the mines!"

MARK_TOKEN = "mine"


# ============================================================================
# Input Parsing
# ============================================================================

@dataclass(frozen=True)
class Turn:
    """
    A parsed player turn.

    Attributes:
        x: 0-based column.
        y: 0-based row.
        mark: True to toggle a mark, False to reveal.
    """

    x: int
    y: int
    mark: bool = False


def parse_mine_count(text: str) -> int:
    """
    Parse the requested number of mines.

    Raises:
        ValueError: If the text is not an integer.
    """
    return int(text.strip())


def parse_turn(text: str) -> Turn:
    """
    Parse a ``col row [mine]`` line into 0-based coordinates.

    Raises:
        ValueError: On a wrong token count, non-numeric coordinates or
            an unknown trailing token.
    """
    tokens = text.split()
    if len(tokens) not in (2, 3):
        raise ValueError(f"Expected 2 or 3 values, got {len(tokens)}")
    if len(tokens) == 3 and tokens[2] != MARK_TOKEN:
        raise ValueError(f"Unknown token: {tokens[2]!r}")

    col, row = int(tokens[0]), int(tokens[1])
    return Turn(x=col - 1, y=row - 1, mark=len(tokens) == 3)


# ============================================================================
# Game Loop
# ============================================================================

def read_mine_count(
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Prompt until a whole number of mines is entered."""
    while True:
        try:
            return parse_mine_count(read(MINES_PROMPT))
        except ValueError:
            write("Please enter a whole number.")


def run(
    game: Game,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> GameState:
    """
    Run the read-eval loop until the game ends or input runs out.

    Args:
        game: A game whose mines are already placed.
        read: Prompting reader, ``input`` by default.
        write: Line writer, ``print`` by default.

    Returns:
        Final game state.
    """
    while not game.is_over:
        try:
            line = read(TURN_PROMPT)
        except EOFError:
            break

        try:
            turn = parse_turn(line)
        except ValueError as error:
            write(f"{error}. {TURN_USAGE}")
            continue

        state = game.play(turn.x, turn.y, turn.mark)
        if state == GameState.LOST:
            write(LOST_MESSAGE)
        write(game.render())
        if state == GameState.WON:
            write(WON_MESSAGE)

    return game.state


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments, set up the board and play."""
    parser = argparse.ArgumentParser(
        description="Minesweeper in the terminal"
    )
    parser.add_argument(
        "--mines", type=int, default=None,
        help="Number of mines (prompted for if omitted)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for mine placement",
    )
    args = parser.parse_args(argv)

    game = Game(seed=args.seed)
    try:
        mines = args.mines if args.mines is not None else read_mine_count()
    except EOFError:
        return

    game.setup(mines)
    print(game.render())
    run(game)
