"""
Board renderer for TicTacToe.
Composes the scene (background, sprites, grid bars, highlight) into an
RGB numpy frame.
"""

import cv2
import numpy as np
from typing import Optional, Tuple

from logic.game_state import Board
from logic.win_evaluator import Evaluation
from .config import RenderConfig
from .geometry import LineHighlight, cell_center, grid_bars, line_highlight
from .sprites import TextureMap, blit


class BoardRenderer:
    """
    Draws the board into frames.

    The background, sprites and grid bars only change when a cell
    changes, so that part is cached and rebuilt on a grid change. The
    highlight bar is drawn on a copy of the cached frame.
    """

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        textures: Optional[TextureMap] = None
    ):
        """
        Initialize the renderer.

        Args:
            config: Render configuration. Uses defaults if not provided.
            textures: Sprite textures. Built from config if not provided.
        """
        self.config = config or RenderConfig()
        self.textures = textures or TextureMap(self.config)

        self._base_frame: Optional[np.ndarray] = None
        self._base_key: Optional[Tuple] = None

        # Number of base-frame rebuilds (for diagnostics and tests)
        self.rebuilds = 0

    def render(self, board: Board, evaluation: Optional[Evaluation] = None) -> np.ndarray:
        """
        Render the board.

        Args:
            board: Board to draw.
            evaluation: Latest evaluation; its winning line is highlighted.

        Returns:
            RGB frame of shape (WINDOW_HEIGHT, WINDOW_WIDTH, 3).
        """
        key = self._grid_key(board)
        if self._base_frame is None or key != self._base_key:
            self._base_frame = self._draw_base(board)
            self._base_key = key
            self.rebuilds += 1

        frame = self._base_frame.copy()

        if evaluation is not None and evaluation.line is not None:
            highlight = line_highlight(evaluation.line, self.config)
            self.draw_bar(frame, highlight, self.config.HIGHLIGHT_COLOR)

        return frame

    def invalidate(self):
        """Force the next render to rebuild the cached frame."""
        self._base_frame = None
        self._base_key = None

    def draw_bar(self, frame: np.ndarray, bar: LineHighlight, color):
        """
        Fill a rotated bar onto a frame.

        Args:
            frame: RGB frame (modified in place).
            bar: Bar geometry relative to the window midpoint.
            color: RGB color.
        """
        rect = bar.to_rotated_rect(self.config.window_center)
        corners = cv2.boxPoints(rect)
        polygon = np.round(corners).astype(np.int32)
        cv2.fillPoly(frame, [polygon], color, self.config.LINE_TYPE)

    def _draw_base(self, board: Board) -> np.ndarray:
        height = self.config.WINDOW_HEIGHT
        width = self.config.WINDOW_WIDTH

        frame = np.empty((height, width, 3), dtype=np.uint8)
        frame[:, :] = self.config.CLEAR_COLOR

        # Sprites first, grid bars sit on top of them
        for col in range(3):
            for row in range(3):
                sprite = self.textures.for_cell(board.grid[col][row])
                if sprite is not None:
                    blit(frame, sprite, cell_center(col, row, self.config))

        for bar in grid_bars(self.config):
            self.draw_bar(frame, bar, self.config.GRID_COLOR)

        return frame

    @staticmethod
    def _grid_key(board: Board) -> Tuple:
        return tuple(cell for column in board.grid for cell in column)


def save_screenshot(frame: np.ndarray, path: str) -> bool:
    """
    Save an RGB frame as an image file.

    Args:
        frame: RGB frame.
        path: Output file path (format from extension).

    Returns:
        True if the file was written.
    """
    ok = cv2.imwrite(path, cv2.cvtColor(frame, cv2.COLOR_RGB2BGR))
    if ok:
        print(f"Saved: {path}")
    else:
        print(f"ERROR: Could not save screenshot to {path}")
    return bool(ok)
