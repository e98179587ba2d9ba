"""
test_group.py
-------------
Unit tests for Group membership and accessors.
"""

import pytest

from bagel.graphics.group import Group


@pytest.fixture
def group():
    return Group("enemies")


class TestGroupMembership:

    def test_accessors(self, group):
        assert group.get_name() == "enemies"
        assert group.get_sprite_count() == 0
        assert group.get_sprite_list() == []

    def test_duplicates_allowed(self, group, make_sprite):
        s = make_sprite("s")
        group.add_sprite(s)
        group.add_sprite(s)
        assert group.get_sprite_count() == 2

    def test_remove_first_identity_match_only(self, group, make_sprite):
        s, t = make_sprite("s"), make_sprite("t")
        for sprite in (s, t, s):
            group.add_sprite(sprite)

        assert group.remove_sprite(s) is True
        assert group.get_sprite_list() == [t, s]

    def test_remove_uses_identity_not_equality(self, group):
        class AlwaysEqual:
            def __eq__(self, other):
                return True

            def draw(self, surface):
                pass

        member = AlwaysEqual()
        group.add_sprite(member)

        assert group.remove_sprite(AlwaysEqual()) is False
        assert group.get_sprite_list() == [member]

    def test_remove_missing_is_noop(self, group, make_sprite):
        group.add_sprite(make_sprite("a"))
        assert group.remove_sprite(make_sprite("b")) is False
        assert group.get_sprite_count() == 1

    def test_sprite_list_is_live(self, group, make_sprite):
        sprites = group.get_sprite_list()
        s = make_sprite("s")
        sprites.append(s)
        assert group.get_sprite_count() == 1
        assert group.get_sprite_list() is sprites


class TestGroupPurge:

    def test_purge_keeps_order_and_list_identity(self, group, make_sprite):
        a, b, c = make_sprite("a"), make_sprite("b"), make_sprite("c")
        for sprite in (a, b, c):
            group.add_sprite(sprite)
        live = group.get_sprite_list()
        b.destroy()

        assert group.purge_destroyed() == 1
        assert live == [a, c]
        assert group.get_sprite_list() is live

    def test_purge_nothing_flagged(self, group, make_sprite):
        group.add_sprite(make_sprite("a"))
        assert group.purge_destroyed() == 0
