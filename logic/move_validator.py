"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass
from .enums import Cell, MoveError
from .lines import BOARD_SIZE


@dataclass
class ValidationResult:
    """Result of move validation (or of applying a move)."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Position must be on the 3x3 grid
    2. Can only place on empty cells

    Whether the round is already decided is the caller's business;
    a full or won board is not rejected here.
    """

    def validate_move(
        self,
        grid: List[List[Cell]],
        col: int,
        row: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            grid: Board grid indexed [col][row].
            col: Column to place in (0-2).
            row: Row to place in (0-2).

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        # Check if col/row are in valid range
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return ValidationResult(
                is_valid=False,
                error=MoveError.OUT_OF_BOUNDS,
                error_message=f"Invalid position ({col}, {row}). Must be 0-2."
            )

        # Check if cell is empty
        if grid[col][row] != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error=MoveError.OCCUPIED_CELL,
                error_message=f"Cell ({col}, {row}) is already occupied by {grid[col][row].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, grid: List[List[Cell]]) -> List[Tuple[int, int]]:
        """
        Get all empty positions.

        Args:
            grid: Board grid indexed [col][row].

        Returns:
            List of (col, row) positions.
        """
        valid_moves = []

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if grid[col][row] == Cell.EMPTY:
                    valid_moves.append((col, row))

        return valid_moves
