"""
scheduler.py
------------
Time and cancellation primitives for the game loop.

TickSource supplies monotonic timestamps (seconds) and the short sleep used
between under-budget iterations. StopToken is the loop's explicit
cancellation signal.
"""

import time


class TickSource:
    """Monotonic wall clock with a sleep primitive."""

    def now(self) -> float:
        return time.perf_counter()

    def sleep(self, seconds: float):
        time.sleep(seconds)


class StopToken:
    """Cancellation flag checked once per loop iteration."""

    def __init__(self):
        self._stopped = False
        self.reason = None

    def request_stop(self, reason: str = "requested"):
        if not self._stopped:
            self.reason = reason
        self._stopped = True

    @property
    def stop_requested(self) -> bool:
        return self._stopped

    def reset(self):
        self._stopped = False
        self.reason = None
