"""Measures the time between frames."""

from __future__ import annotations

import time
from typing import Callable


class FrameClock:
    """Tracks the seconds elapsed between successive updates."""

    def __init__(self, counter: Callable[[], float] = time.perf_counter) -> None:
        self._counter = counter
        self._last = counter()
        self._delta_time = 0.0

    def update(self) -> None:
        """Record the time since the previous update."""
        current = self._counter()
        self._delta_time = current - self._last
        self._last = current

    @property
    def delta_time(self) -> float:
        """Seconds between the last two updates."""
        return self._delta_time