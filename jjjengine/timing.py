"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable

from jjjengine.canvas import Canvas


class TimeManager:
    """Measures the time between frames and reports frames per second."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._delta_time = 0.0
        self._prev = 0.0

    def init(self) -> None:
        """Start measuring from the current clock reading."""
        self._prev = self._clock()

    def update(self) -> None:
        """Record the time elapsed since the previous update."""
        now = self._clock()
        self._delta_time = now - self._prev
        self._prev = now

    def fps_text(self) -> str:
        """Text showing the current frame rate; zero when no time has passed."""
        fps = int(1.0 / self._delta_time) if self._delta_time > 0 else 0
        return f"FPS : {fps}"

    def render(self, canvas: Canvas) -> None:
        """Draw the frame rate in the top-left corner."""
        canvas.text(0, 0, self.fps_text())

    @property
    def delta_time(self) -> float:
        """Seconds between the last two updates."""
        return self._delta_time