"""
Main entry point for TicTacToe.

Two players share one machine. O moves first.
- Default: sprite window (click a cell to play)
- --no-ui: console mode (type "col row")
"""

import sys
from typing import Optional, Tuple

from game_session import GameSession
from render.config import RenderConfig


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse a console move such as "0 2" or "0,2".

    Returns:
        (col, row), or None if the text is not two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def run_console(session: GameSession, stream=sys.stdin):
    """
    Play in the terminal.

    Args:
        session: The game session.
        stream: Where moves are read from.
    """
    print("Enter moves as 'col row' (0-2). 'r' resets, 'q' quits.")
    session.board.print_board()

    while session.is_running:
        print(f"\n{session.board.current_player().value} > ", end="", flush=True)
        line = stream.readline()
        if not line:
            break

        text = line.strip().lower()
        if text == "q":
            print("\nGame quit by user.")
            break
        if text == "r":
            session.reset()
            session.board.print_board()
            continue

        if not session.input_enabled:
            print("Round is over. 'r' for a new round, 'q' to quit.")
            continue

        move = parse_move(text)
        if move is None:
            print(f"WARNING: Could not parse '{text}'. Use 'col row'.")
            continue

        result = session.play(*move)
        if not result.is_valid:
            print(f"WARNING: {result.error_message}")
            continue

        if not session.evaluation.is_over:
            session.board.print_board()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic Tac Toe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without a window (console mode)"
    )
    parser.add_argument(
        "--assets",
        default=None,
        help=f"Directory with {RenderConfig.CIRCLE_TEXTURE} and {RenderConfig.CROSS_TEXTURE}"
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help=f"Window width (default {RenderConfig.WINDOW_WIDTH})"
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help=f"Window height (default {RenderConfig.WINDOW_HEIGHT})"
    )
    parser.add_argument(
        "--no-diagnostics",
        action="store_true",
        help="Don't print frame-time diagnostics"
    )

    args = parser.parse_args()

    config = RenderConfig(
        width=args.width,
        height=args.height,
        asset_dir=args.assets,
        log_diagnostics=False if args.no_diagnostics else None
    )

    try:
        if args.no_ui:
            print("\n" + "=" * 60)
            print("   Tic Tac Toe (console)")
            print("=" * 60 + "\n")
            run_console(GameSession(config))
            return

        from ui import TicTacToeUI
        print("\n" + "=" * 60)
        print("   Tic Tac Toe")
        print("=" * 60 + "\n")
        ui = TicTacToeUI(config)
        ui.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
