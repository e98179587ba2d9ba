"""
conftest.py
-----------
Shared pytest configuration and fixtures for bagel tests.

Contains:
- Headless SDL setup so pygame never opens a real window
- Fake clock, display and input collaborators for loop tests
- Pytest markers
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Headless pygame before anything imports it
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Project root on the path for `import bagel`
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bagel.core.debug.debug_logger import LoggerConfig  # noqa: E402


# ===========================================================
# Test Doubles
# ===========================================================

class FakeClock:
    """TickSource stand-in: time only moves when a test (or sleep) moves it."""

    def __init__(self, start=0.0):
        self.t = start
        self.sleeps = []

    def now(self):
        return self.t

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.t += seconds

    def advance(self, seconds):
        self.t += seconds


class FakeInput:
    """Input stand-in that records polls."""

    def __init__(self):
        self.update_calls = 0
        self.quit_requested = False

    def update(self):
        self.update_calls += 1


class RecordingSprite:
    """Sprite stand-in that logs its draws into a shared list."""

    def __init__(self, name, log=None):
        self.name = name
        self.log = log if log is not None else []
        self.destroy_signal = False

    def draw(self, surface):
        self.log.append(self.name)

    def destroy(self):
        self.destroy_signal = True

    def __repr__(self):
        return f"RecordingSprite({self.name!r})"


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def restore_logger_config():
    """Restore logger categories after tests that toggle them."""
    original = dict(LoggerConfig.CATEGORIES)
    yield
    LoggerConfig.CATEGORIES.clear()
    LoggerConfig.CATEGORIES.update(original)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fake_input():
    return FakeInput()


@pytest.fixture
def mock_display():
    """DisplayManager stand-in with repaint/close recorded."""
    display = MagicMock()
    display.repaint = MagicMock()
    display.close = MagicMock()
    return display


@pytest.fixture
def draw_log():
    return []


@pytest.fixture
def make_sprite(draw_log):
    """Factory for RecordingSprites sharing one draw log."""
    def _make(name):
        return RecordingSprite(name, draw_log)
    return _make


# Test utilities
def create_mock_surface(width=800, height=600):
    """Create a mock pygame.Surface with common methods."""
    surface = MagicMock()
    surface.get_width.return_value = width
    surface.get_height.return_value = height
    surface.get_size.return_value = (width, height)
    return surface


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests that drive real pygame (dummy driver)")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag everything not marked integration as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
