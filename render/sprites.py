"""
Sprite textures for TicTacToe.
Loads the O and X textures and blits them onto frames.
"""

import cv2
import numpy as np
from pathlib import Path
from typing import Optional, Tuple
from logic.enums import Cell
from .config import RenderConfig


class TextureMap:
    """
    The O (circle) and X (cross) sprites as RGBA numpy arrays.

    Textures are read from the asset directory when the PNGs exist,
    otherwise they are drawn with cv2.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """
        Initialize the textures.

        Args:
            config: Render configuration. Uses defaults if not provided.
        """
        self.config = config or RenderConfig()
        size = self.config.SPRITE_SIZE

        self.circle = self._load(self.config.CIRCLE_TEXTURE)
        if self.circle is None:
            self.circle = _draw_circle(
                size, self.config.CIRCLE_COLOR, self.config.SPRITE_STROKE, self.config.LINE_TYPE
            )

        self.cross = self._load(self.config.CROSS_TEXTURE)
        if self.cross is None:
            self.cross = _draw_cross(
                size, self.config.CROSS_COLOR, self.config.SPRITE_STROKE, self.config.LINE_TYPE
            )

    def for_cell(self, cell: Cell) -> Optional[np.ndarray]:
        """Get the sprite for a cell value (None for empty cells)."""
        if cell == Cell.O:
            return self.circle
        if cell == Cell.X:
            return self.cross
        return None

    def _load(self, filename: str) -> Optional[np.ndarray]:
        """
        Load a texture from the asset directory.

        Returns:
            RGBA image resized to SPRITE_SIZE, or None if unavailable.
        """
        path = Path(self.config.ASSET_DIR) / filename
        if not path.exists():
            return None

        image = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        if image is None:
            print(f"WARNING: Could not read texture {path}, drawing it instead")
            return None

        if image.ndim == 2:
            image = cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
        elif image.shape[2] == 3:
            image = cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
        else:
            image = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)

        size = self.config.SPRITE_SIZE
        print(f"Loaded texture {path}")
        return cv2.resize(image, (size, size), interpolation=cv2.INTER_AREA)


def _draw_circle(size: int, color: Tuple[int, int, int], stroke: int, line_type: int) -> np.ndarray:
    sprite = np.zeros((size, size, 4), dtype=np.uint8)
    center = (size // 2, size // 2)
    radius = size // 2 - stroke
    cv2.circle(sprite, center, radius, (*color, 255), stroke, line_type)
    return sprite


def _draw_cross(size: int, color: Tuple[int, int, int], stroke: int, line_type: int) -> np.ndarray:
    sprite = np.zeros((size, size, 4), dtype=np.uint8)
    lo = stroke
    hi = size - 1 - stroke
    cv2.line(sprite, (lo, lo), (hi, hi), (*color, 255), stroke, line_type)
    cv2.line(sprite, (lo, hi), (hi, lo), (*color, 255), stroke, line_type)
    return sprite


def blit(frame: np.ndarray, sprite: np.ndarray, center: Tuple[float, float]):
    """
    Alpha-blend an RGBA sprite onto an RGB frame, centered at a pixel.
    Parts of the sprite outside the frame are clipped.

    Args:
        frame: RGB frame (modified in place).
        sprite: RGBA sprite.
        center: (x, y) pixel position of the sprite center.
    """
    sprite_h, sprite_w = sprite.shape[:2]
    frame_h, frame_w = frame.shape[:2]

    x0 = int(round(center[0] - sprite_w / 2))
    y0 = int(round(center[1] - sprite_h / 2))
    x1, y1 = x0 + sprite_w, y0 + sprite_h

    # Clip to frame
    fx0, fy0 = max(x0, 0), max(y0, 0)
    fx1, fy1 = min(x1, frame_w), min(y1, frame_h)
    if fx0 >= fx1 or fy0 >= fy1:
        return

    patch = sprite[fy0 - y0:fy1 - y0, fx0 - x0:fx1 - x0]
    alpha = patch[:, :, 3:4].astype(np.float32) / 255.0

    region = frame[fy0:fy1, fx0:fx1].astype(np.float32)
    blended = patch[:, :, :3].astype(np.float32) * alpha + region * (1.0 - alpha)
    frame[fy0:fy1, fx0:fx1] = blended.astype(np.uint8)
