"""
bagel
-----
Minimal 2D game scaffold on pygame: a window, a fixed-budget game loop,
per-tick input polling and named sprite groups drawn in order.
"""

from bagel.core.runtime.game import Game
from bagel.core.runtime.game_loop import GameLogic, GameLoop
from bagel.core.runtime.group_registry import GroupNotFoundError, GroupRegistry
from bagel.core.services.input_manager import Input
from bagel.graphics.group import Group
from bagel.graphics.sprite import ShapeSprite, Sprite

__version__ = "0.1.0"

__all__ = [
    'Game',
    'GameLogic',
    'GameLoop',
    'Group',
    'GroupNotFoundError',
    'GroupRegistry',
    'Input',
    'ShapeSprite',
    'Sprite',
]
