"""
Screen geometry for TicTacToe.
Converts board positions and winning lines into pixel space.
"""

import numpy as np
from typing import Tuple
from dataclasses import dataclass

from logic.lines import Line
from .config import RenderConfig


@dataclass(frozen=True)
class LineHighlight:
    """
    Geometric descriptor of a highlight bar.
    """
    center: Tuple[float, float]   # Offset from the window midpoint (pixels)
    angle: float                  # Degrees, clockwise on screen (y grows down)
    length: float                 # Pixels along the bar
    thickness: float              # Pixels across the bar

    def to_rotated_rect(self, window_center: Tuple[float, float]):
        """
        Build a cv2 RotatedRect tuple placed in window pixels.

        Args:
            window_center: Pixel position of the window midpoint.

        Returns:
            ((cx, cy), (length, thickness), angle) for cv2.boxPoints.
        """
        cx = window_center[0] + self.center[0]
        cy = window_center[1] + self.center[1]
        return ((cx, cy), (self.length, self.thickness), self.angle)


def cell_offset(col: int, row: int, cell_size: float) -> Tuple[float, float]:
    """Offset of a cell center from the window midpoint."""
    return ((col - 1) * cell_size, (row - 1) * cell_size)


def cell_center(col: int, row: int, config: RenderConfig) -> Tuple[float, float]:
    """Pixel position of a cell center in the window."""
    dx, dy = cell_offset(col, row, config.CELL_SIZE)
    cx, cy = config.window_center
    return (cx + dx, cy + dy)


def line_highlight(line: Line, config: RenderConfig) -> LineHighlight:
    """
    Describe the bar drawn over a winning line.

    The bar spans the whole grid along the line direction: 3 cells for
    rows and columns, 3 cell diagonals for the diagonals.

    Args:
        line: The winning line.
        config: Render configuration (cell size and thicknesses).

    Returns:
        LineHighlight for the line.
    """
    start = np.array(cell_offset(*line.start, config.CELL_SIZE))
    end = np.array(cell_offset(*line.end, config.CELL_SIZE))

    direction = end - start
    center = (start + end) / 2.0

    # start and end are two cells apart, the bar covers three
    length = float(np.linalg.norm(direction)) * 1.5
    angle = float(np.degrees(np.arctan2(direction[1], direction[0])))

    is_diagonal = direction[0] != 0 and direction[1] != 0
    thickness = config.DIAGONAL_THICKNESS if is_diagonal else config.BAR_THICKNESS

    return LineHighlight(
        center=(float(center[0]), float(center[1])),
        angle=angle,
        length=length,
        thickness=thickness
    )


def grid_bars(config: RenderConfig):
    """
    Describe the four bars separating the cells.

    Returns:
        List of LineHighlight, two vertical then two horizontal.
    """
    half = config.CELL_SIZE / 2.0
    length = float(config.GRID_SIZE)
    thickness = config.BAR_THICKNESS

    return [
        LineHighlight(center=(half, 0.0), angle=90.0, length=length, thickness=thickness),
        LineHighlight(center=(-half, 0.0), angle=90.0, length=length, thickness=thickness),
        LineHighlight(center=(0.0, half), angle=0.0, length=length, thickness=thickness),
        LineHighlight(center=(0.0, -half), angle=0.0, length=length, thickness=thickness),
    ]
