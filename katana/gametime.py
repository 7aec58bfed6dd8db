"""Timing values for game updates and rendering."""

from __future__ import annotations

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)

MAX_ELAPSED = 0.2
"""Frame gaps longer than this many seconds are ignored."""

_START = time.monotonic()


def _clock() -> float:
    return time.monotonic() - _START


class GameTime:
    """Tracks the total running time and the time between frames, in seconds."""

    def __init__(self, clock: Callable[[], float] = _clock) -> None:
        self._clock = clock
        self._previous_total = clock()
        self._current_total = clock()
        self.elapsed_time: float = 0.0

    @property
    def total_time(self) -> float:
        """Seconds since the clock started."""
        return self._current_total

    def update(self) -> None:
        """Advance the timing values to the clock's current reading.

        Gaps longer than MAX_ELAPSED keep the previous elapsed time.
        """
        self._previous_total = self._current_total
        self._current_total = self._clock()
        delta = self._current_total - self._previous_total
        if delta <= MAX_ELAPSED:
            self.elapsed_time = delta
        else:
            logger.warning("Frame took %.3f seconds; elapsed time not updated", delta)