"""
Render configuration for TicTacToe.
All the settings for the window, grid, sprites and diagnostics.

Colors are RGB tuples (frames are composed in RGB and handed to PIL).
"""

import cv2
from typing import Optional, Tuple


class RenderConfig:
    """
    Configuration class for render settings.
    Class constants are the defaults; the constructor can override
    the window size, the asset directory and diagnostics.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_WIDTH = 1280
    WINDOW_HEIGHT = 720
    TARGET_FPS = 30
    FRAME_INTERVAL_MS = 1000 // TARGET_FPS  # ~33ms per tick

    # ==================== GRID SETTINGS ====================
    # Size of one cell in pixels; the grid is centered in the window
    CELL_SIZE = 200
    GRID_SIZE = CELL_SIZE * 3  # 600 pixels

    # Thickness of the grid bars and the straight highlight bars
    BAR_THICKNESS = 12.0
    # Diagonal highlight is slightly thicker to look the same width
    DIAGONAL_THICKNESS = 12.5

    # ==================== COLORS ====================
    CLEAR_COLOR = (26, 26, 26)        # rgb(0.1, 0.1, 0.1)
    GRID_COLOR = (191, 191, 191)      # rgb(0.75, 0.75, 0.75)
    HIGHLIGHT_COLOR = (191, 191, 191)
    CIRCLE_COLOR = (66, 165, 245)
    CROSS_COLOR = (239, 83, 80)

    # Line type used for every cv2 drawing call (antialiased)
    LINE_TYPE = cv2.LINE_AA

    # ==================== SPRITES ====================
    ASSET_DIR = "assets"
    CIRCLE_TEXTURE = "circle.png"
    CROSS_TEXTURE = "cross.png"

    # Sprite edge length in pixels (textures are resized to this)
    SPRITE_SIZE = 160
    # Stroke width used when sprites are drawn procedurally
    SPRITE_STROKE = 18

    # ==================== DIAGNOSTICS ====================
    LOG_DIAGNOSTICS = True
    DIAGNOSTICS_INTERVAL_S = 1.0

    # ==================== SCREENSHOTS ====================
    SCREENSHOT_PATTERN = "tictactoe_{timestamp}.png"

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        asset_dir: Optional[str] = None,
        log_diagnostics: Optional[bool] = None
    ):
        """
        Initialize the configuration.

        Args:
            width: Window width in pixels (default WINDOW_WIDTH).
            height: Window height in pixels (default WINDOW_HEIGHT).
            asset_dir: Directory holding the sprite PNGs.
            log_diagnostics: Print frame-time diagnostics.
        """
        if width is not None:
            self.WINDOW_WIDTH = width
        if height is not None:
            self.WINDOW_HEIGHT = height
        if asset_dir is not None:
            self.ASSET_DIR = asset_dir
        if log_diagnostics is not None:
            self.LOG_DIAGNOSTICS = log_diagnostics

    @property
    def window_size(self) -> Tuple[int, int]:
        """(width, height) of the window in pixels."""
        return (self.WINDOW_WIDTH, self.WINDOW_HEIGHT)

    @property
    def window_center(self) -> Tuple[float, float]:
        """Pixel position of the window midpoint."""
        return (self.WINDOW_WIDTH / 2.0, self.WINDOW_HEIGHT / 2.0)
