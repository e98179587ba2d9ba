"""
draw_manager.py
---------------
Rendering pass over the group registry.

Responsibilities:
- Clear the canvas to the background color
- Draw groups in registry order, sprites in insertion order
- Snapshot each sprite list before drawing it
"""

from bagel.core.debug.debug_logger import DebugLogger
from bagel.core.runtime.game_settings import Display


class DrawManager:
    """Draws every sprite of every group onto a surface."""

    def __init__(self, groups, background=Display.BACKGROUND):
        """
        Args:
            groups: Iterable of Group objects, walked fresh on every render
            background: Fill color, or None to leave the surface untouched
        """
        self.groups = groups
        self.background = background

        DebugLogger.init_entry("DrawManager")

    def render(self, surface):
        """Paint callback: clear, then draw everything in list order."""
        if self.background is not None:
            surface.fill(self.background)

        drawn = 0
        for group in list(self.groups):
            for sprite in tuple(group.get_sprite_list()):
                sprite.draw(surface)
                drawn += 1

        DebugLogger.trace(f"Rendered {drawn} sprite(s)", category="render")
        return drawn
