"""
Win evaluator for TicTacToe.
Classifies the board as won, drawn, or still in progress.
"""

from typing import Optional
from dataclasses import dataclass
from .enums import Cell, Outcome
from .game_state import Board
from .lines import Line, WINNING_LINES


@dataclass(frozen=True)
class Evaluation:
    """
    Result of scanning the board.
    """
    outcome: Outcome
    line: Optional[Line] = None   # Winning line, only for X_WINS / O_WINS
    max_o: int = 0                # Most O marks found on any single line
    max_x: int = 0                # Most X marks found on any single line
    empties: int = 0              # Empty cells on the whole board

    @property
    def is_over(self) -> bool:
        return self.outcome != Outcome.NONE

    @property
    def winner(self) -> Optional[Cell]:
        if self.outcome == Outcome.O_WINS:
            return Cell.O
        if self.outcome == Outcome.X_WINS:
            return Cell.X
        return None


class WinEvaluator:
    """
    Checks for win conditions in TicTacToe.

    Every line is scanned (rows, columns, diagonals in that order) and
    the highest O and X counts across lines decide the outcome. The first
    complete line in scan order is reported as the winning line.
    """

    def __init__(self, lines=WINNING_LINES):
        self.lines = lines

    def evaluate(self, board: Board) -> Evaluation:
        """
        Evaluate the board.

        Args:
            board: The board to classify. It is not modified.

        Returns:
            Evaluation with the outcome and, for a win, the winning line.
        """
        max_o = 0
        max_x = 0
        winning_line: Optional[Line] = None

        for line in self.lines:
            line_o = 0
            line_x = 0
            for col, row in line.cells:
                cell = board.grid[col][row]
                if cell == Cell.O:
                    line_o += 1
                elif cell == Cell.X:
                    line_x += 1

            if winning_line is None and (line_o >= 3 or line_x >= 3):
                winning_line = line

            max_o = max(max_o, line_o)
            max_x = max(max_x, line_x)

        empties = board.count_empty()
        outcome = self._decide(max_o, max_x, empties)

        # Only a win carries a line to highlight
        if outcome not in (Outcome.O_WINS, Outcome.X_WINS):
            winning_line = None

        return Evaluation(
            outcome=outcome,
            line=winning_line,
            max_o=max_o,
            max_x=max_x,
            empties=empties
        )

    @staticmethod
    def _decide(max_o: int, max_x: int, empties: int) -> Outcome:
        # Both complete cannot happen in a legal game; reported as a draw
        if max_o >= 3 and max_x >= 3:
            return Outcome.DRAW
        if max_o >= 3:
            return Outcome.O_WINS
        if max_x >= 3:
            return Outcome.X_WINS
        if empties == 0:
            return Outcome.DRAW
        return Outcome.NONE


# Quick test
if __name__ == "__main__":
    print("Testing WinEvaluator...")

    evaluator = WinEvaluator()

    board = Board()
    for col, row in [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]:
        board.apply_move(col, row)

    board.print_board()
    result = evaluator.evaluate(board)
    print(f"Outcome: {result.outcome}, line: {result.line.name if result.line else None}")
    assert result.outcome == Outcome.O_WINS

    print("\nWinEvaluator test done!")
