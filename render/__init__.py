"""
Render module for TicTacToe.
Handles window geometry, sprites, pointer mapping and frame composition.
"""

from .config import RenderConfig
from .input_adapter import InputAdapter, pointer_to_cell
from .geometry import LineHighlight, line_highlight
from .sprites import TextureMap
from .board_view import BoardRenderer, save_screenshot
from .diagnostics import FrameTimeDiagnostics
