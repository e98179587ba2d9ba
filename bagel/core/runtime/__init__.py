"""
Runtime exports.

Settings constants, timing primitives and the loop itself.
"""

from bagel.core.runtime.game_settings import (
    Display,
    Timing,
    Debug,
)
from bagel.core.runtime.scheduler import TickSource, StopToken
from bagel.core.runtime.frame_timer import FrameTimer

__all__ = [
    # Settings
    'Display',
    'Timing',
    'Debug',
    # Timing
    'TickSource',
    'StopToken',
    'FrameTimer',
]
