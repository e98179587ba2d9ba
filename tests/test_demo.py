"""
test_demo.py
------------
Tests for the bouncing-box demo plus a headless end-to-end run on
pygame's dummy video driver.
"""

import pygame
import pytest

from bagel.core.services.input_manager import Input
from bagel.demo import BOX_SIZE, Box, BouncingBoxGame
from bagel.graphics.sprite import ShapeSprite


# ===========================================================
# Fixtures
# ===========================================================

class FeedInput(Input):
    """Real Input fed from a list instead of the pygame queue."""

    def __init__(self):
        self.queue = []
        super().__init__(event_source=self._drain)

    def _drain(self):
        events, self.queue = self.queue, []
        return events


@pytest.fixture
def demo(fake_clock):
    game = BouncingBoxGame(seed=7, tick_source=fake_clock)
    game.input = FeedInput()
    game.initialize()
    return game


# ===========================================================
# Demo Logic
# ===========================================================

class TestBox:

    def test_bounces_off_right_edge(self):
        box = Box(100 - BOX_SIZE - 1, 10, 120, 0, (0, 0, 0))
        box.move(0.1, 100, 100)
        assert box.vx == -120
        assert box.x == 100 - BOX_SIZE

    def test_moves_freely_inside(self):
        box = Box(10, 10, 100, 50, (0, 0, 0))
        box.move(0.1, 200, 200)
        assert (box.x, box.y) == pytest.approx((20, 15))


class TestBouncingBoxGame:

    def test_initialize_builds_groups(self, demo):
        assert demo.get_group_sprite_count("boxes") == 5
        assert demo.get_group_sprite_list("player") == [demo.player]

    def test_space_spawns_box(self, demo):
        demo.input.queue.append(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        demo.input.update()
        demo.update(0.016)
        assert demo.get_group_sprite_count("boxes") == 6

    def test_player_moves_with_held_key(self, demo):
        start_x = demo.player.x
        demo.input.queue.append(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
        demo.input.update()
        demo.update(0.5)
        assert demo.player.x > start_x

    def test_click_destroys_box(self, demo):
        box = demo.get_group_sprite_list("boxes")[0]
        box.vx = box.vy = 0
        target = (int(box.x) + 1, int(box.y) + 1)
        demo.input.queue.append(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=target, button=1))
        demo.input.update()
        demo.update(0.016)

        assert box.destroy_signal is True
        demo.groups.purge_destroyed()
        assert box not in demo.get_group_sprite_list("boxes")

    def test_escape_stops(self, demo):
        demo.input.queue.append(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        demo.input.update()
        demo.update(0.016)
        assert demo.stop_token.stop_requested


# ===========================================================
# Headless End-to-End
# ===========================================================

@pytest.mark.integration
class TestHeadlessRun:

    def test_run_paints_groups_to_window(self, fake_clock):
        class PaintCheck(BouncingBoxGame):
            def initialize(self):
                self.create_group("marker")
                self.add_sprite_to_group(ShapeSprite(0, 0, 10, 10, (255, 0, 0)), "marker")
                self.ticks = 0
                self.pixels = []

            def update(self, dt):
                self.ticks += 1
                self.pixels.append(tuple(self.display.get_surface().get_at((5, 5)))[:3])
                if self.ticks >= 2:
                    self.stop()

        game = PaintCheck(tick_source=fake_clock, width=64, height=48)
        game.run()

        assert game.ticks == 2
        assert game.pixels == [(255, 0, 0), (255, 0, 0)]
        assert game.loop.state == "stopped"
        assert not pygame.get_init()
