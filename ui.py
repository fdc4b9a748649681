"""
TicTacToe UI
A window for two players sharing one mouse, using Tkinter.

Frames are composed as numpy images by the renderer and shown on a
canvas through PIL. The game runs on the Tk thread: event callbacks only
queue input, and a ~30 FPS after() loop drains it.

Keys:
- Left click: place a mark
- r: new round
- s: save screenshot
- Esc: quit
"""

import tkinter as tk
from PIL import Image, ImageTk
from typing import Optional

from game_session import GameSession, KeyPressed, PointerPressed, QUIT_KEY
from render.config import RenderConfig
from render.board_view import BoardRenderer, save_screenshot
from render.diagnostics import FrameTimeDiagnostics


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize the UI."""
        self.config = config or RenderConfig()
        self.session = GameSession(self.config)
        self.renderer = BoardRenderer(self.config)
        self.diagnostics = FrameTimeDiagnostics(self.config)

        self._photo: Optional[ImageTk.PhotoImage] = None
        self._canvas_image: Optional[int] = None

        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter window."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.geometry(f"{self.config.WINDOW_WIDTH}x{self.config.WINDOW_HEIGHT}")
        self.root.resizable(False, False)

        self.canvas = tk.Canvas(
            self.root,
            width=self.config.WINDOW_WIDTH,
            height=self.config.WINDOW_HEIGHT,
            highlightthickness=0,
            bg='#1a1a1a'
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)

        # Input only gets queued here, the update loop consumes it
        self.canvas.bind("<Button-1>", self._on_click)
        self.root.bind("<Key>", self._on_key)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        self.session.push(PointerPressed(event.x, event.y))

    def _on_key(self, event):
        self.session.push(KeyPressed(event.keysym))

    def _update_loop(self):
        """Main update loop (runs on UI thread)."""
        self.session.tick()

        if not self.session.is_running:
            self._quit()
            return

        frame = self.renderer.render(self.session.board, self.session.evaluation)

        if self.session.screenshot_requested:
            save_screenshot(frame, self.session.screenshot_path())
            self.session.screenshot_requested = False

        self._show_frame(frame)
        self.root.title(f"{self.config.WINDOW_TITLE} - {self.session.status_text()}")
        self.diagnostics.tick()

        self.root.after(self.config.FRAME_INTERVAL_MS, self._update_loop)

    def _show_frame(self, frame):
        """Put a frame on the canvas."""
        image = Image.fromarray(frame)
        photo = ImageTk.PhotoImage(image)

        if self._canvas_image is None:
            self._canvas_image = self.canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        else:
            self.canvas.itemconfigure(self._canvas_image, image=photo)

        self._photo = photo  # Keep reference

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.session.is_running = False
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.after(0, self._update_loop)
        self.root.mainloop()


def main():
    """Main entry point."""
    print("\n" + "=" * 60)
    print("   Tic Tac Toe")
    print("=" * 60)
    print(f"   Click to play, 'r' new round, 's' screenshot, {QUIT_KEY} to quit")
    print("=" * 60 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
