"""
Frame-time diagnostics for TicTacToe.
Measures time between frames and prints FPS periodically.
"""

import time
import numpy as np
from typing import Callable, Optional
from .config import RenderConfig


class FrameTimeDiagnostics:
    """
    Tracks frame times and reports them to the console.

    Call tick() once per frame. Every DIAGNOSTICS_INTERVAL_S seconds a
    line with the average FPS and frame time is printed (when enabled).
    """

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        clock: Callable[[], float] = time.perf_counter
    ):
        self.config = config or RenderConfig()
        self.clock = clock

        self.frame_count = 0
        self._last_frame: Optional[float] = None
        self._last_report = self.clock()
        self._frame_times = []

    def tick(self) -> Optional[float]:
        """
        Record a frame.

        Returns:
            Time since the previous frame in seconds (None on the first).
        """
        now = self.clock()
        delta = None

        if self._last_frame is not None:
            delta = now - self._last_frame
            self._frame_times.append(delta)

        self._last_frame = now
        self.frame_count += 1

        if now - self._last_report >= self.config.DIAGNOSTICS_INTERVAL_S:
            if self.config.LOG_DIAGNOSTICS and self._frame_times:
                print(self.summary())
            self._frame_times = []
            self._last_report = now

        return delta

    @property
    def average_frame_time(self) -> float:
        """Mean frame time (seconds) over the current interval."""
        if not self._frame_times:
            return 0.0
        return float(np.mean(self._frame_times))

    @property
    def fps(self) -> float:
        frame_time = self.average_frame_time
        return 1.0 / frame_time if frame_time > 0 else 0.0

    def summary(self) -> str:
        return (
            f"diagnostics: fps={self.fps:.1f} "
            f"frame_time={self.average_frame_time * 1000:.2f}ms "
            f"frames={self.frame_count}"
        )
