"""
demo.py
-------
Bouncing-box sample game.

Run with:
    python -m bagel.demo

Controls: arrow keys / WASD move the player box, SPACE spawns a box,
clicking a box destroys it, ESC quits.
"""

import random

import pygame

from bagel.core.debug.debug_logger import DebugLogger
from bagel.core.runtime.game import Game
from bagel.graphics.sprite import ShapeSprite

PLAYER_SPEED = 240
BOX_SPEED = 120
BOX_SIZE = 24


class Box(ShapeSprite):
    """ShapeSprite with a velocity that bounces off the window edges."""

    def __init__(self, x, y, vx, vy, color):
        super().__init__(x, y, BOX_SIZE, BOX_SIZE, color)
        self.vx = vx
        self.vy = vy

    def move(self, dt, width, height):
        self.x += self.vx * dt
        self.y += self.vy * dt

        if self.x < 0 or self.x + self.width > width:
            self.vx = -self.vx
            self.x = min(max(self.x, 0), width - self.width)
        if self.y < 0 or self.y + self.height > height:
            self.vy = -self.vy
            self.y = min(max(self.y, 0), height - self.height)


class BouncingBoxGame(Game):
    """Player box plus a group of bouncing boxes."""

    def __init__(self, seed=None, **kwargs):
        kwargs.setdefault("title", "bagel demo")
        super().__init__(**kwargs)
        self.rng = random.Random(seed)
        self.player = None

    def initialize(self):
        self.create_group("boxes")
        self.create_group("player")

        self.player = ShapeSprite(self.window_width / 2, self.window_height / 2,
                                  BOX_SIZE, BOX_SIZE, (40, 90, 200))
        self.add_sprite_to_group(self.player, "player")

        for _ in range(5):
            self.spawn_box()

    def spawn_box(self):
        box = Box(
            self.rng.uniform(0, self.window_width - BOX_SIZE),
            self.rng.uniform(0, self.window_height - BOX_SIZE),
            self.rng.choice((-1, 1)) * BOX_SPEED,
            self.rng.choice((-1, 1)) * BOX_SPEED,
            (self.rng.randint(80, 255), self.rng.randint(80, 255), 60),
        )
        self.add_sprite_to_group(box, "boxes")
        return box

    def update(self, dt):
        if self.input.action_pressed("back"):
            self.stop("escape pressed")
            return

        dx = int(self.input.action_held("move_right")) - int(self.input.action_held("move_left"))
        dy = int(self.input.action_held("move_down")) - int(self.input.action_held("move_up"))
        self.player.x += dx * PLAYER_SPEED * dt
        self.player.y += dy * PLAYER_SPEED * dt

        if self.input.is_key_pressed(pygame.K_SPACE):
            self.spawn_box()
            DebugLogger.action(f"Spawned box ({self.get_group_sprite_count('boxes')} total)")

        clicked = self.input.is_mouse_pressed(1)
        for box in self.get_group_sprite_list("boxes"):
            box.move(dt, self.window_width, self.window_height)
            if clicked and box.rect.collidepoint(self.input.mouse_position):
                box.destroy()


def main():
    BouncingBoxGame().run()


if __name__ == "__main__":
    main()
