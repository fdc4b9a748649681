"""
Logic module for TicTacToe.
Handles board state, move rules, and win detection.
"""

from .enums import Cell, Outcome, MoveError
from .lines import Line, WINNING_LINES, BOARD_SIZE
from .game_state import Board
from .move_validator import MoveValidator, ValidationResult
from .win_evaluator import WinEvaluator, Evaluation
