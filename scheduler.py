# scheduler.py
from __future__ import annotations
import time
from typing import Callable

FrameCallback = Callable[[float], None]


def now_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.perf_counter() * 1000.0


class FrameScheduler:
    """Holds the one frame callback waiting for the next redraw.

    The view calls run_frame() once per on_update; a callback that wants
    another frame registers itself again via request().
    """

    def __init__(self):
        self._pending: FrameCallback | None = None

    def request(self, callback: FrameCallback):
        self._pending = callback

    def run_frame(self, timestamp: float) -> bool:
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        callback(timestamp)
        return True
