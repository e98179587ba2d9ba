"""
game_loop.py
------------
Defines the GameLoop class that drives a game's initialize/update hooks.

Responsibilities
----------------
- Call initialize() once, after the window, canvas and input exist
- Fire a tick whenever the frame budget has elapsed:
  repaint → timing → input poll → update(dt) → end-of-frame cleanup
- Sleep briefly between under-budget iterations
- Run until the StopToken is set
"""

import time
from typing import Callable, Optional, Protocol

from bagel.core.debug.debug_logger import DebugLogger
from bagel.core.runtime.frame_timer import FrameTimer
from bagel.core.runtime.game_settings import Debug, Timing
from bagel.core.runtime.scheduler import StopToken, TickSource


class GameLogic(Protocol):
    """The two hooks every game supplies."""

    def initialize(self) -> None: ...

    def update(self, dt: float) -> None: ...


class GameLoop:
    """
    Single-threaded loop around a GameLogic value.

    States: created → initializing → running → stopped.
    Exceptions raised by the hooks are not caught here.
    """

    def __init__(self, logic: GameLogic, display, input_manager,
                 timer: Optional[FrameTimer] = None,
                 tick_source: Optional[TickSource] = None,
                 stop_token: Optional[StopToken] = None,
                 on_frame_end: Optional[Callable[[], None]] = None):
        self.logic = logic
        self.display = display
        self.input = input_manager
        self.timer = timer or FrameTimer()
        self.tick_source = tick_source or TickSource()
        self.stop_token = stop_token or StopToken()
        self.on_frame_end = on_frame_end

        self.state = "created"
        self.tick_count = 0
        self._last_perf_warn_time = float("-inf")

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self):
        """Initialize the game, then loop until a stop is requested."""
        self.start()

        DebugLogger.section("Game Loop")
        while not self.stop_token.stop_requested:
            self.step()

        self.state = "stopped"
        DebugLogger.system(f"Loop stopped ({self.stop_token.reason}) after {self.tick_count} ticks",
                           category="loop")

    def start(self):
        """Reset timing and run the initialize hook."""
        self.state = "initializing"
        self.timer.start(self.tick_source.now())
        self.logic.initialize()
        self.state = "running"

    def step(self) -> bool:
        """
        One loop iteration.

        Returns:
            bool: True if a tick fired, False if the loop only waited.
        """
        if self.timer.is_due(self.tick_source.now()):
            self._fire_tick()
            return True

        self._wait()
        return False

    def stop(self, reason: str = "requested"):
        self.stop_token.request_stop(reason)

    # ===========================================================
    # Tick
    # ===========================================================
    def _fire_tick(self):
        start_total = time.perf_counter()

        self.display.repaint()

        dt = self.timer.tick(self.tick_source.now())

        self.input.update()
        if self.input.quit_requested:
            self.stop("window closed")

        self.logic.update(dt)

        if self.on_frame_end is not None:
            self.on_frame_end()

        self.tick_count += 1
        self._check_slow_frame((time.perf_counter() - start_total) * 1000)

    def _wait(self):
        try:
            self.tick_source.sleep(Timing.SLEEP_SECONDS)
        except InterruptedError as e:
            DebugLogger.warn(f"Tick wait interrupted: {e}", category="loop")

    def _check_slow_frame(self, frame_time_ms: float):
        if frame_time_ms <= self.timer.frame_budget * 1000:
            return
        now = time.perf_counter()
        if now - self._last_perf_warn_time > Debug.SLOW_FRAME_WARN_INTERVAL:
            self._last_perf_warn_time = now
            DebugLogger.warn(f"Perf ⚠️ SLOW FRAME: {frame_time_ms:.2f} ms", category="loop")
