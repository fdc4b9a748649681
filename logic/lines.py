"""
The eight fixed winning lines of a 3x3 board.
"""

from dataclasses import dataclass
from typing import Tuple


BOARD_SIZE = 3


@dataclass(frozen=True)
class Line:
    """
    A winning line: three (col, row) positions.
    """
    index: int                              # Position in scan order (0-7)
    name: str                               # e.g. "row_0", "diagonal"
    cells: Tuple[Tuple[int, int], ...]      # (col, row) positions

    @property
    def start(self) -> Tuple[int, int]:
        return self.cells[0]

    @property
    def end(self) -> Tuple[int, int]:
        return self.cells[-1]


def _build_lines() -> Tuple[Line, ...]:
    entries = []

    # Rows
    for row in range(BOARD_SIZE):
        entries.append((f"row_{row}", tuple((col, row) for col in range(BOARD_SIZE))))

    # Columns
    for col in range(BOARD_SIZE):
        entries.append((f"column_{col}", tuple((col, row) for row in range(BOARD_SIZE))))

    # Diagonals
    entries.append(("diagonal", tuple((i, i) for i in range(BOARD_SIZE))))
    entries.append(("anti_diagonal", tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE))))

    return tuple(Line(index=i, name=name, cells=cells) for i, (name, cells) in enumerate(entries))


# Scan order: 3 rows, 3 columns, then the 2 diagonals.
# Earlier lines win ties when several are complete at once.
WINNING_LINES = _build_lines()

LINES_BY_NAME = {line.name: line for line in WINNING_LINES}
