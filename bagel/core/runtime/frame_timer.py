"""
frame_timer.py
--------------
Tick policy and frame statistics for the game loop.

Responsibilities
----------------
- Decide whether the frame budget has elapsed since the last fired tick.
- Compute delta time and total elapsed time when a tick fires.
- Count ticks per accumulated second and report them as "FPS : <n>".
"""

from bagel.core.debug.debug_logger import DebugLogger
from bagel.core.runtime.game_settings import Timing

# Float slack so timestamps like 0.016 * k still meet a 16 ms budget.
_EPSILON = 1e-9


class FrameTimer:
    """Fixed-budget tick decision with dt, elapsed time and an FPS counter."""

    def __init__(self, target_fps: int = Timing.TARGET_FPS,
                 report_interval: float = Timing.FPS_REPORT_INTERVAL):
        if target_fps <= 0:
            raise ValueError(f"target_fps must be positive, got {target_fps}")

        self.target_fps = target_fps
        self.frame_budget = (1000 // target_fps) / 1000.0
        self.report_interval = report_interval

        self.previous_time = 0.0
        self.delta_time = 0.0
        self.elapsed_time = 0.0

        self.count_fps = 0
        self.timer_fps = 0.0
        self.last_fps = None

    def start(self, now: float):
        """Reset the clock so the first tick measures from `now`."""
        self.previous_time = now
        self.delta_time = 0.0
        self.elapsed_time = 0.0
        self.count_fps = 0
        self.timer_fps = 0.0

    def is_due(self, now: float) -> bool:
        """True when at least one frame budget has passed since the last tick."""
        return now - self.previous_time + _EPSILON >= self.frame_budget

    def tick(self, now: float) -> float:
        """
        Advance to `now` and update frame statistics.

        Returns:
            float: Seconds since the previous tick.
        """
        self.delta_time = now - self.previous_time
        self.previous_time = now
        self.elapsed_time += self.delta_time

        self.count_fps += 1
        self.timer_fps += self.delta_time

        if self.timer_fps + _EPSILON >= self.report_interval:
            self.last_fps = self.count_fps
            DebugLogger.report(f"FPS : {self.count_fps}")
            self.count_fps = 0
            self.timer_fps = 0.0

        return self.delta_time
