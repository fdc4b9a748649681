"""
Game session for TicTacToe.

Owns the board for one window and runs the per-tick loop:
1. Drain pending input events
2. Apply at most one move per click
3. Re-evaluate the board
4. Publish the evaluation for rendering
"""

import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Union

from logic.enums import MoveError, Outcome
from logic.game_state import Board
from logic.move_validator import ValidationResult
from logic.win_evaluator import Evaluation, WinEvaluator
from render.config import RenderConfig
from render.input_adapter import InputAdapter


@dataclass
class PointerPressed:
    """Left button pressed at a window pixel."""
    x: float
    y: float


@dataclass
class KeyPressed:
    """A key press, identified by its keysym (e.g. "Escape", "r")."""
    key: str


InputEvent = Union[PointerPressed, KeyPressed]

QUIT_KEY = "Escape"
RESET_KEY = "r"
SCREENSHOT_KEY = "s"


class GameSession:
    """
    The explicitly owned game state: board, evaluator and input queue.

    The board itself never refuses a move because the round is over;
    the session stops forwarding clicks once the evaluation is decided.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """
        Initialize the session.

        Args:
            config: Render configuration (used for pointer mapping).
        """
        self.config = config or RenderConfig()
        self.board = Board()
        self.evaluator = WinEvaluator()
        self.input_adapter = InputAdapter(self.config)

        self.events: Deque[InputEvent] = deque()
        self.evaluation: Evaluation = self.evaluator.evaluate(self.board)

        self.is_running = True
        self.screenshot_requested = False
        self.rounds_played = 0

    @property
    def input_enabled(self) -> bool:
        return not self.evaluation.is_over

    def push(self, event: InputEvent):
        """Queue an input event for the next tick."""
        self.events.append(event)

    def tick(self) -> bool:
        """
        Process every pending event.

        Returns:
            True if the board changed during this tick.
        """
        changed = False

        while self.events:
            event = self.events.popleft()

            if isinstance(event, PointerPressed):
                changed = self._handle_pointer(event) or changed
            elif isinstance(event, KeyPressed):
                changed = self._handle_key(event) or changed

        return changed

    def play(self, col: int, row: int) -> ValidationResult:
        """
        Apply a move at a board position and re-evaluate.

        Args:
            col: Column index.
            row: Row index.

        Returns:
            The ValidationResult from the board.
        """
        player = self.board.current_player()
        result = self.board.apply_move(col, row)

        if not result.is_valid:
            return result

        print(f">>> {player.value} placed at ({col}, {row})")

        self.evaluation = self.evaluator.evaluate(self.board)
        if self.evaluation.is_over:
            self._announce_result()

        return result

    def reset(self):
        """Start a new round on the same board."""
        print("\nResetting game...")
        self.board.reset()
        self.events.clear()
        self.evaluation = self.evaluator.evaluate(self.board)
        self.rounds_played += 1
        print("Game reset! O to move.")

    def _handle_pointer(self, event: PointerPressed) -> bool:
        if not self.input_enabled:
            return False

        cell = self.input_adapter.map_pointer(event.x, event.y)
        if cell is None:
            return False  # Off the grid

        result = self.play(*cell)
        if result.error == MoveError.OCCUPIED_CELL:
            print(f"Ignored: {result.error_message}")

        return result.is_valid

    def _handle_key(self, event: KeyPressed) -> bool:
        if event.key == QUIT_KEY:
            print("\nGame quit by user.")
            self.is_running = False
        elif event.key == RESET_KEY:
            self.reset()
            return True
        elif event.key == SCREENSHOT_KEY:
            self.screenshot_requested = True
        return False

    def screenshot_path(self) -> str:
        return self.config.SCREENSHOT_PATTERN.format(timestamp=int(time.time()))

    def status_text(self) -> str:
        """One-line description of the round for the window title/status."""
        outcome = self.evaluation.outcome
        if outcome == Outcome.O_WINS:
            return "O WINS!"
        if outcome == Outcome.X_WINS:
            return "X WINS!"
        if outcome == Outcome.DRAW:
            return "DRAW!"
        return f"Turn: {self.board.current_player().value}"

    def _announce_result(self):
        print("\n" + "=" * 60)
        print("   GAME OVER!")
        print("=" * 60)

        self.board.print_board()

        if self.evaluation.winner is not None:
            line = self.evaluation.line
            where = f" on {line.name}" if line is not None else ""
            print(f"\n{self.evaluation.winner.value} WINS{where}!")
        else:
            print("\nIt's a DRAW!")

        print("Press 'r' for a new round, Esc to quit.")
        print("=" * 60)
