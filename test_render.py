"""
Test script for the TicTacToe render layer and game session.
Everything runs headless: frames are numpy arrays, no window is opened.

Usage:
    python test_render.py
    pytest test_render.py
"""

import io
import os
import sys
import tempfile
from pathlib import Path

import cv2
import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from game_session import GameSession, KeyPressed, PointerPressed
from logic.enums import Cell, Outcome
from logic.lines import LINES_BY_NAME
from main import parse_move, run_console
from render.board_view import BoardRenderer, save_screenshot
from render.config import RenderConfig
from render.diagnostics import FrameTimeDiagnostics
from render.geometry import cell_center, line_highlight
from render.input_adapter import pointer_to_cell
from render.sprites import TextureMap


WINDOW = (1280, 720)
CELL = 200


def make_config(**kwargs) -> RenderConfig:
    # Never pick up real asset files, sprites are drawn
    kwargs.setdefault("asset_dir", "__no_assets__")
    kwargs.setdefault("log_diagnostics", False)
    return RenderConfig(**kwargs)


def click_cell(session: GameSession, col: int, row: int):
    x, y = cell_center(col, row, session.config)
    session.push(PointerPressed(x, y))


# ==================== INPUT MAPPING ====================

def test_pointer_center_cells():
    assert pointer_to_cell(640, 360, WINDOW, CELL) == (1, 1)
    assert pointer_to_cell(440, 160, WINDOW, CELL) == (0, 0)
    assert pointer_to_cell(840, 560, WINDOW, CELL) == (2, 2)
    assert pointer_to_cell(840, 160, WINDOW, CELL) == (2, 0)


def test_pointer_rounding_to_nearest_cell():
    # 99 pixels right of the middle column still maps to it
    assert pointer_to_cell(739, 360, WINDOW, CELL) == (1, 1)
    assert pointer_to_cell(741, 360, WINDOW, CELL) == (2, 1)
    assert pointer_to_cell(939, 360, WINDOW, CELL) == (2, 1)


def test_pointer_off_grid():
    assert pointer_to_cell(0, 0, WINDOW, CELL) is None
    assert pointer_to_cell(941, 360, WINDOW, CELL) is None
    assert pointer_to_cell(640, 700, WINDOW, CELL) is None
    # Exactly half a cell outside rounds away from the grid
    assert pointer_to_cell(340, 360, WINDOW, CELL) is None


# ==================== GEOMETRY ====================

def test_row_and_column_highlights():
    config = make_config()

    row = line_highlight(LINES_BY_NAME["row_0"], config)
    assert row.center == (0.0, -200.0)
    assert row.angle == 0.0
    assert np.isclose(row.length, 600.0)
    assert row.thickness == config.BAR_THICKNESS

    column = line_highlight(LINES_BY_NAME["column_0"], config)
    assert column.center == (-200.0, 0.0)
    assert np.isclose(column.angle, 90.0)
    assert np.isclose(column.length, 600.0)


def test_diagonal_highlights():
    config = make_config()

    diagonal = line_highlight(LINES_BY_NAME["diagonal"], config)
    assert diagonal.center == (0.0, 0.0)
    assert np.isclose(diagonal.angle, 45.0)
    assert np.isclose(diagonal.length, 600.0 * np.sqrt(2))
    assert diagonal.thickness == config.DIAGONAL_THICKNESS

    anti = line_highlight(LINES_BY_NAME["anti_diagonal"], config)
    assert np.isclose(anti.angle, -45.0)


# ==================== SPRITES & RENDERER ====================

def test_drawn_textures():
    config = make_config()
    textures = TextureMap(config)

    assert textures.circle.shape == (config.SPRITE_SIZE, config.SPRITE_SIZE, 4)
    assert textures.cross.shape == (config.SPRITE_SIZE, config.SPRITE_SIZE, 4)
    assert textures.for_cell(Cell.EMPTY) is None
    assert textures.for_cell(Cell.O) is textures.circle


def test_textures_loaded_from_assets():
    with tempfile.TemporaryDirectory() as tmp:
        image = np.full((64, 64, 3), 255, dtype=np.uint8)
        cv2.imwrite(os.path.join(tmp, RenderConfig.CIRCLE_TEXTURE), image)

        config = make_config(asset_dir=tmp)
        textures = TextureMap(config)

        assert textures.circle.shape == (config.SPRITE_SIZE, config.SPRITE_SIZE, 4)
        assert np.all(textures.circle[:, :, 3] == 255)


def test_render_empty_board():
    config = make_config()
    renderer = BoardRenderer(config)
    session = GameSession(config)

    frame = renderer.render(session.board, session.evaluation)

    assert frame.shape == (720, 1280, 3)
    assert tuple(frame[360, 640]) == config.CLEAR_COLOR
    # Vertical grid bar between columns 0 and 1
    assert tuple(frame[360, 540]) == config.GRID_COLOR


def test_render_sprite_and_highlight():
    config = make_config()
    renderer = BoardRenderer(config)
    session = GameSession(config)

    for col, row in [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]:
        session.play(col, row)

    # A point on the ring of the O sprite in cell (0, 0)
    radius = config.SPRITE_SIZE // 2 - config.SPRITE_STROKE
    frame = renderer.render(session.board)
    assert np.allclose(frame[160, 440 + radius], config.CIRCLE_COLOR, atol=2)

    # Gap between cells (0, 0) and (0, 1) is background until highlighted
    assert tuple(frame[250, 440]) == config.CLEAR_COLOR

    highlighted = renderer.render(session.board, session.evaluation)
    assert session.evaluation.line.name == "column_0"
    assert tuple(highlighted[250, 440]) == config.HIGHLIGHT_COLOR


def test_render_cache():
    config = make_config()
    renderer = BoardRenderer(config)
    session = GameSession(config)

    renderer.render(session.board)
    renderer.render(session.board)
    assert renderer.rebuilds == 1

    session.play(1, 1)
    renderer.render(session.board)
    assert renderer.rebuilds == 2


def test_save_screenshot():
    config = make_config()
    frame = BoardRenderer(config).render(GameSession(config).board)

    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "shot.png")
        assert save_screenshot(frame, path)
        loaded = cv2.imread(path)
        assert loaded.shape == frame.shape


# ==================== DIAGNOSTICS ====================

def test_frame_diagnostics():
    times = iter([0.0, 0.0, 0.5, 1.0])
    diagnostics = FrameTimeDiagnostics(make_config(), clock=lambda: next(times))

    assert diagnostics.tick() is None
    assert diagnostics.tick() == 0.5
    assert np.isclose(diagnostics.fps, 2.0)

    # Third frame crosses the one second interval and starts a new window
    diagnostics.tick()
    assert diagnostics.frame_count == 3
    assert diagnostics.average_frame_time == 0.0


# ==================== SESSION ====================

def test_session_click_flow():
    session = GameSession(make_config())

    click_cell(session, 1, 1)
    assert session.tick()
    assert session.board.get_cell(1, 1) == Cell.O
    assert session.board.turn == 1

    # Clicking the same cell again changes nothing
    click_cell(session, 1, 1)
    assert not session.tick()
    assert session.board.turn == 1

    # Off-grid click is dropped before reaching the board
    session.push(PointerPressed(5, 5))
    assert not session.tick()
    assert session.board.turn == 1


def test_session_stops_input_after_win():
    session = GameSession(make_config())
    for col, row in [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]:
        click_cell(session, col, row)
    session.tick()

    assert session.evaluation.outcome == Outcome.O_WINS
    assert not session.input_enabled
    assert session.status_text() == "O WINS!"

    click_cell(session, 2, 0)
    assert not session.tick()
    assert session.board.get_cell(2, 0) == Cell.EMPTY


def test_session_keys():
    session = GameSession(make_config())
    session.play(1, 1)

    session.push(KeyPressed("s"))
    session.tick()
    assert session.screenshot_requested

    session.push(KeyPressed("r"))
    assert session.tick()
    assert session.board.turn == 0
    assert session.rounds_played == 1
    assert session.status_text() == "Turn: O"

    session.push(KeyPressed("Escape"))
    session.tick()
    assert not session.is_running


# ==================== CONSOLE ====================

def test_parse_move():
    assert parse_move("0 2") == (0, 2)
    assert parse_move("1,1") == (1, 1)
    assert parse_move("a b") is None
    assert parse_move("1") is None


def test_console_game():
    session = GameSession(make_config())
    moves = "0 0\n1 1\nbad\n1 1\n0 1\n2 2\n0 2\n2 0\nq\n"

    run_console(session, io.StringIO(moves))

    assert session.evaluation.outcome == Outcome.O_WINS
    # The move after the win is refused
    assert session.board.get_cell(2, 0) == Cell.EMPTY
    assert session.board.turn == 5


TESTS = [
    test_pointer_center_cells,
    test_pointer_rounding_to_nearest_cell,
    test_pointer_off_grid,
    test_row_and_column_highlights,
    test_diagonal_highlights,
    test_drawn_textures,
    test_textures_loaded_from_assets,
    test_render_empty_board,
    test_render_sprite_and_highlight,
    test_render_cache,
    test_save_screenshot,
    test_frame_diagnostics,
    test_session_click_flow,
    test_session_stops_input_after_win,
    test_session_keys,
    test_parse_move,
    test_console_game,
]


def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("   TicTacToe - Render & Session Tests")
    print("=" * 60)

    all_passed = True
    for test in TESTS:
        try:
            test()
            print(f"  {test.__name__}: ✓ PASS")
        except AssertionError as e:
            print(f"  {test.__name__}: ✗ FAIL {e}")
            all_passed = False

    print("=" * 60)

    if all_passed:
        print("\nAll tests passed!\n")
        return 0
    else:
        print("\nSome tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
