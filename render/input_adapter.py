"""
Input adapter for TicTacToe.
Maps window pixel coordinates to board (col, row) positions.
"""

import numpy as np
from typing import Optional, Tuple
from .config import RenderConfig


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer, halves away from zero (np.round rounds to even)."""
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


def pointer_to_cell(
    px: float,
    py: float,
    window_size: Tuple[int, int],
    cell_size: float
) -> Optional[Tuple[int, int]]:
    """
    Map a pointer position to a board cell.

    The position is centered on the window midpoint, divided by the cell
    size and shifted so the middle cell is (1, 1). Pixel y grows downward,
    so row 0 is the top row on screen.

    Args:
        px: Pointer x in window pixels.
        py: Pointer y in window pixels.
        window_size: (width, height) of the window.
        cell_size: Cell edge length in pixels.

    Returns:
        (col, row), or None when the pointer is off the grid.
    """
    pointer = np.array([px, py], dtype=np.float64)
    half = np.array(window_size, dtype=np.float64) / 2.0

    cell = round_half_away((pointer - half) / cell_size + 1.0)

    if np.all(cell >= 0) and np.all(cell <= 2):
        return (int(cell[0]), int(cell[1]))

    return None


class InputAdapter:
    """
    Small wrapper binding pointer_to_cell to a render configuration.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def map_pointer(self, px: float, py: float) -> Optional[Tuple[int, int]]:
        return pointer_to_cell(px, py, self.config.window_size, self.config.CELL_SIZE)
