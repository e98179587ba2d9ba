"""
game.py
-------
Abstract base class extended by concrete games.

Responsibilities
----------------
- Hold window configuration until the window is created
- Own the group registry and expose name-based group/sprite helpers
- Wire display, rendering pass, input and loop together in run()
- Declare the initialize() and update(dt) hooks
"""

from abc import ABC, abstractmethod

from bagel.core.debug.debug_logger import DebugLogger
from bagel.core.runtime.frame_timer import FrameTimer
from bagel.core.runtime.game_loop import GameLoop
from bagel.core.runtime.game_settings import Display, Timing
from bagel.core.runtime.group_registry import GroupRegistry
from bagel.core.runtime.scheduler import StopToken, TickSource
from bagel.core.services.config_manager import load_game_config
from bagel.core.services.display_manager import DisplayManager
from bagel.core.services.input_manager import Input
from bagel.graphics.draw_manager import DrawManager
from bagel.graphics.group import Group


class Game(ABC):
    """
    Base class for games.

    Subclasses implement initialize() to populate groups and update(dt) to
    advance game state. run() blocks until stop() is called or the window
    is closed.
    """

    def __init__(self, title: str = Display.CAPTION, width: int = Display.WIDTH,
                 height: int = Display.HEIGHT, target_fps: int = Timing.TARGET_FPS,
                 tick_source: TickSource = None):
        self.window_title = title
        self.window_width = width
        self.window_height = height

        self.groups = GroupRegistry()
        self.timer = FrameTimer(target_fps)
        self.tick_source = tick_source or TickSource()
        self.stop_token = StopToken()

        self.display = None
        self.draw_manager = None
        self.input = None
        self.loop = None

    # ===========================================================
    # Extension Hooks
    # ===========================================================

    @abstractmethod
    def initialize(self):
        """Create groups and sprites. Called once before the loop starts."""

    @abstractmethod
    def update(self, dt: float):
        """Advance game state by dt seconds. Called once per tick."""

    # ===========================================================
    # Window Configuration
    # ===========================================================

    def set_window_title(self, title: str):
        if self._window_created("title"):
            return
        self.window_title = title

    def set_window_size(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Window size must be positive, got {width}x{height}")
        if self._window_created("size"):
            return
        self.window_width = width
        self.window_height = height

    def load_settings(self, filename: str = "game.json", strict: bool = False):
        """Apply window/timing settings from a JSON config file."""
        config = load_game_config(filename, strict=strict)
        window = config["window"]

        # Validate everything before touching any setting.
        try:
            title = str(window["title"])
            width = int(window["width"])
            height = int(window["height"])
            target_fps = int(config["timing"]["target_fps"])
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid settings in {filename}: {e}") from e
        if width <= 0 or height <= 0:
            raise ValueError(f"Window size must be positive, got {width}x{height}")
        if target_fps <= 0:
            raise ValueError(f"target_fps must be positive, got {target_fps}")

        self.set_window_title(title)
        self.set_window_size(width, height)
        if self.display is None and target_fps != self.timer.target_fps:
            self.timer = FrameTimer(target_fps)
        return config

    def _window_created(self, setting: str) -> bool:
        if self.display is None:
            return False
        DebugLogger.warn(f"Window already created; ignoring {setting} change", category="display")
        return True

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def run(self):
        """Create the window, initialize the game and loop until stopped."""
        DebugLogger.section("Initializing Game")
        self.stop_token.reset()

        self.display = self._create_display()
        try:
            self.draw_manager = DrawManager(self.groups)
            self.display.set_paint_callback(self.draw_manager.render)
            self.input = self._create_input()

            self.loop = GameLoop(
                self,
                self.display,
                self.input,
                timer=self.timer,
                tick_source=self.tick_source,
                stop_token=self.stop_token,
                on_frame_end=self.groups.purge_destroyed,
            )
            self.loop.run()
        finally:
            self.display.close()

    def stop(self, reason: str = "game requested stop"):
        """Ask the loop to exit before its next iteration."""
        self.stop_token.request_stop(reason)

    def _create_display(self):
        return DisplayManager(self.window_width, self.window_height, self.window_title)

    def _create_input(self):
        return Input(self.display)

    # ===========================================================
    # Timing Accessors
    # ===========================================================

    @property
    def delta_time(self) -> float:
        return self.timer.delta_time

    @property
    def elapsed_time(self) -> float:
        return self.timer.elapsed_time

    # ===========================================================
    # Group Registry
    # ===========================================================

    def create_group(self, group_name: str) -> Group:
        return self.groups.create_group(group_name)

    def get_group(self, group_name: str) -> Group:
        return self.groups.get_group(group_name)

    def add_sprite_to_group(self, sprite, group_name: str):
        self.groups.add_sprite_to_group(sprite, group_name)

    def remove_sprite_from_group(self, sprite, group_name: str) -> bool:
        return self.groups.remove_sprite_from_group(sprite, group_name)

    def get_group_sprite_list(self, group_name: str) -> list:
        """Live sprite list of the named group; useful in for-loops over one kind of sprite."""
        return self.groups.get_group_sprite_list(group_name)

    def get_group_sprite_count(self, group_name: str) -> int:
        return self.groups.get_group_sprite_count(group_name)
