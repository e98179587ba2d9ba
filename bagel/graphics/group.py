"""
group.py
--------
Named, ordered collection of sprites.

Notes
-----
- Insertion order is draw order; duplicates are allowed.
- get_sprite_list() returns the live list, not a copy. The render pass
  iterates a snapshot, so mutating the list mid-frame is safe and takes
  effect on the next frame.
"""

from bagel.core.debug.debug_logger import DebugLogger


class Group:
    """A named list of sprites used for batch draw, listing and counting."""

    def __init__(self, name: str):
        self.name = name
        self.sprites = []

    def __repr__(self):
        return f"Group(name={self.name!r}, sprites={len(self.sprites)})"

    # ===========================================================
    # Membership
    # ===========================================================

    def add_sprite(self, sprite):
        """Append a sprite to the end of the draw order."""
        self.sprites.append(sprite)

    def remove_sprite(self, sprite) -> bool:
        """
        Remove the first entry that is this exact sprite object.

        Returns:
            bool: True if a sprite was removed, False if it was not present.
        """
        for index, member in enumerate(self.sprites):
            if member is sprite:
                del self.sprites[index]
                return True
        DebugLogger.trace(f"Sprite not in group '{self.name}', nothing removed", category="registry")
        return False

    def purge_destroyed(self) -> int:
        """Drop every sprite whose destroy flag is set. Returns the count removed."""
        before = len(self.sprites)
        self.sprites[:] = [s for s in self.sprites if not getattr(s, "destroy_signal", False)]
        removed = before - len(self.sprites)
        if removed:
            DebugLogger.trace(f"Purged {removed} destroyed sprite(s) from '{self.name}'",
                              category="registry")
        return removed

    # ===========================================================
    # Accessors
    # ===========================================================

    def get_sprite_list(self) -> list:
        return self.sprites

    def get_sprite_count(self) -> int:
        return len(self.sprites)

    def get_name(self) -> str:
        return self.name
