"""
Board state for TicTacToe.
Tracks the 3x3 grid and the turn counter.
"""

from typing import List, Tuple
from dataclasses import dataclass, field
from .enums import Cell
from .lines import BOARD_SIZE
from .move_validator import MoveValidator, ValidationResult


def _empty_grid() -> List[List[Cell]]:
    return [[Cell.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


@dataclass
class Board:
    """
    The state of one TicTacToe round.

    Tracks:
    - The 3x3 grid, indexed grid[col][row]
    - The turn counter (number of accepted moves)

    O moves on even turns, X on odd turns, so O always opens.
    The board does not know whether the round is over: it keeps
    accepting moves on a won board until the caller stops asking.
    """

    grid: List[List[Cell]] = field(default_factory=_empty_grid)
    turn: int = 0
    validator: MoveValidator = field(default_factory=MoveValidator, repr=False, compare=False)

    def current_player(self) -> Cell:
        """Get the cell value the next move will place."""
        return Cell.O if self.turn % 2 == 0 else Cell.X

    def get_cell(self, col: int, row: int) -> Cell:
        return self.grid[col][row]

    def apply_move(self, col: int, row: int) -> ValidationResult:
        """
        Place the current player's mark at the given position.

        Args:
            col: Column index (0-2).
            row: Row index (0-2).

        Returns:
            ValidationResult. On rejection the grid and turn are unchanged
            and the result carries MoveError.OUT_OF_BOUNDS or
            MoveError.OCCUPIED_CELL.
        """
        result = self.validator.validate_move(self.grid, col, row)
        if not result.is_valid:
            return result

        self.grid[col][row] = self.current_player()
        self.turn += 1

        return result

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (col, row) tuples.
        """
        return self.validator.get_valid_moves(self.grid)

    def count_empty(self) -> int:
        return sum(cell == Cell.EMPTY for column in self.grid for cell in column)

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        return Board(
            grid=[[cell for cell in column] for column in self.grid],
            turn=self.turn
        )

    def reset(self):
        """Empty the grid and rewind the turn counter for a new round."""
        self.grid = _empty_grid()
        self.turn = 0

    def print_board(self):
        """Print the board to console."""
        print("\n    0   1   2")
        print("  +---+---+---+")

        for row in range(BOARD_SIZE):
            row_str = "|"
            for col in range(BOARD_SIZE):
                row_str += f" {self.grid[col][row].value} |"
            print(f"{row} {row_str}")
            print("  +---+---+---+")

        print(f"\nTurn {self.turn}, next: {self.current_player().value}")


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()

    moves = [
        (0, 0),  # O
        (1, 1),  # X
        (0, 1),  # O
        (2, 2),  # X
        (0, 2),  # O - column 0 complete
    ]

    for col, row in moves:
        print(f"\n{board.current_player().value} moves to ({col}, {row})")
        board.apply_move(col, row)
        board.print_board()

    result = board.apply_move(0, 0)
    print(f"\nMove (0,0) again: valid={result.is_valid}, error={result.error}")

    print("\nBoard test done!")
