"""
Core services exports.

Provides configuration loading, the window provider and input polling.
"""

from bagel.core.services.config_manager import load_config, load_game_config
from bagel.core.services.input_manager import Input
from bagel.core.services.display_manager import DisplayManager

__all__ = [
    # Config
    'load_config',
    'load_game_config',
    # Services
    'Input',
    'DisplayManager',
]
