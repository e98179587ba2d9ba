"""
display_manager.py
------------------
Window and canvas provider.

Responsibilities:
- Create the pygame window at a given size and caption
- Hold the paint callback used for the rendering pass
- Repaint on demand (callback, then flip)
- Close the window on shutdown
"""

import pygame

from bagel.core.debug.debug_logger import DebugLogger


class DisplayManager:
    """
    Owns the pygame window.

    The paint callback receives the window surface and draws the frame;
    repaint() runs it synchronously and presents the result.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, width=800, height=600, caption=""):
        """
        Create the window.

        Args:
            width: Content area width in pixels
            height: Content area height in pixels
            caption: Window title
        """
        DebugLogger.init_entry("DisplayManager")

        if not pygame.get_init():
            pygame.init()

        self.width = width
        self.height = height
        self.caption = caption
        self._paint_callback = None

        self.window = pygame.display.set_mode((width, height))
        pygame.display.set_caption(caption)

        DebugLogger.init_sub(f"Display Mode: Windowed ({width}x{height})", level=1)

    # ===========================================================
    # Canvas
    # ===========================================================

    def set_paint_callback(self, callback):
        """Register the function that draws a frame onto the window surface."""
        self._paint_callback = callback

    def get_surface(self):
        return self.window

    def repaint(self):
        """Run the paint callback and present the frame."""
        if self._paint_callback is not None:
            self._paint_callback(self.window)
        pygame.display.flip()

    # ===========================================================
    # Shutdown
    # ===========================================================

    def close(self):
        """Tear down the window and pygame."""
        pygame.display.quit()
        pygame.quit()
        DebugLogger.system("Pygame terminated", category="display")
