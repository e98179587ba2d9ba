"""
sprite.py
---------
Base drawable entity held by groups.

Responsibilities
----------------
- Define the draw contract every sprite implements.
- Carry the destroy flag used for end-of-frame removal from groups.
"""

from abc import ABC, abstractmethod

import pygame


class Sprite(ABC):
    """Abstract drawable. Subclasses render themselves onto a surface."""

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = x
        self.y = y
        self.visible = True
        self.destroy_signal = False

    @abstractmethod
    def draw(self, surface):
        """Render this sprite onto the given pygame surface."""

    def destroy(self):
        """Flag this sprite for removal at the end of the current frame."""
        self.destroy_signal = True

    def set_position(self, x: float, y: float):
        self.x = x
        self.y = y


class ShapeSprite(Sprite):
    """Solid rectangle sprite, enough for prototypes and the demo."""

    def __init__(self, x: float = 0.0, y: float = 0.0, width: int = 32, height: int = 32,
                 color=(255, 255, 255)):
        super().__init__(x, y)
        self.width = width
        self.height = height
        self.color = color

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)

    def draw(self, surface):
        if not self.visible:
            return
        pygame.draw.rect(surface, self.color, self.rect)
