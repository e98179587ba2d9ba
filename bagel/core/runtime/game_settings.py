"""
game_settings.py
----------------
Centralized constants for window, timing and debug defaults.
"""


# ===========================================================
# Display
# ===========================================================

class Display:
    """Window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 600
    CAPTION: str = ""
    BACKGROUND: tuple = (238, 238, 238)


# ===========================================================
# Timing
# ===========================================================

class Timing:
    """Game loop tick policy."""
    TARGET_FPS: int = 60
    SLEEP_SECONDS: float = 0.001
    FPS_REPORT_INTERVAL: float = 1.0


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Runtime diagnostics -- not related to logging."""
    # Slow-frame threshold is the timer's frame budget.
    SLOW_FRAME_WARN_INTERVAL: float = 1.0
