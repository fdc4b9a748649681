"""
Shared enums for the TicTacToe game logic.
"""

from enum import Enum


class Cell(Enum):
    """The value held by one square of the board."""
    EMPTY = " "
    X = "X"
    O = "O"


class Outcome(Enum):
    """Classification of the round after a move."""
    NONE = "none"      # Game continues
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"


class MoveError(Enum):
    """Reasons a move can be rejected."""
    OUT_OF_BOUNDS = "out_of_bounds"
    OCCUPIED_CELL = "occupied_cell"
