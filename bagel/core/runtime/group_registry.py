"""
group_registry.py
-----------------
Ordered registry of sprite groups, looked up by name.

Responsibilities
----------------
- Create groups in registration order (names are not checked for uniqueness).
- Resolve names with a first-match linear scan.
- Fail fast on unknown names: there is no implicit empty group.
"""

from bagel.core.debug.debug_logger import DebugLogger
from bagel.graphics.group import Group


class GroupNotFoundError(LookupError):
    """Raised when a group name has never been registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"There is no group with the name: {name}")


class GroupRegistry:
    """Ordered list of Group objects with name-based helpers."""

    def __init__(self):
        self._groups = []

    def __len__(self):
        return len(self._groups)

    def __iter__(self):
        return iter(self._groups)

    # ===========================================================
    # Group Lifecycle
    # ===========================================================

    def create_group(self, name: str) -> Group:
        """Create a new group and append it, even if the name is taken."""
        group = Group(name)
        self._groups.append(group)
        DebugLogger.state(f"Created group '{name}' (#{len(self._groups)})", category="registry")
        return group

    def get_group(self, name: str) -> Group:
        """
        Return the first group registered under this name.

        Raises:
            GroupNotFoundError: if no group has this name.
        """
        for group in self._groups:
            if group.get_name() == name:
                return group
        raise GroupNotFoundError(name)

    def get_groups(self) -> list:
        return list(self._groups)

    # ===========================================================
    # Sprite Helpers
    # ===========================================================

    def add_sprite_to_group(self, sprite, name: str):
        self.get_group(name).add_sprite(sprite)

    def remove_sprite_from_group(self, sprite, name: str) -> bool:
        return self.get_group(name).remove_sprite(sprite)

    def get_group_sprite_list(self, name: str) -> list:
        return self.get_group(name).get_sprite_list()

    def get_group_sprite_count(self, name: str) -> int:
        return self.get_group(name).get_sprite_count()

    def purge_destroyed(self) -> int:
        """Remove destroyed sprites from every group."""
        return sum(group.purge_destroyed() for group in self._groups)
