"""
input_manager.py
----------------
Per-tick input snapshot built from the pygame event queue.

Provides:
- Key and mouse-button edge detection (pressed, held, released)
- Named actions bound to key lists
- Mouse position and window-close detection
"""

import pygame

from bagel.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_left": [pygame.K_LEFT, pygame.K_a],
    "move_right": [pygame.K_RIGHT, pygame.K_d],
    "move_up": [pygame.K_UP, pygame.K_w],
    "move_down": [pygame.K_DOWN, pygame.K_s],
    "confirm": [pygame.K_RETURN, pygame.K_SPACE],
    "back": [pygame.K_ESCAPE],
}


class Input:
    """
    Polls device state once per tick.

    Usage:
        if game.input.is_key_pressed(pygame.K_SPACE):   # Rising edge
            player.jump()

        if game.input.action_held("move_left"):         # Continuous
            player.x -= speed * dt
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, display=None, key_bindings=None, event_source=None):
        """
        Args:
            display: DisplayManager the events belong to (kept for reference)
            key_bindings: action -> list of key codes (DEFAULT_KEY_BINDINGS if None)
            event_source: callable returning pending events (pygame.event.get if None)
        """
        DebugLogger.init_entry("Input")

        self.display = display
        self.key_bindings = DEFAULT_KEY_BINDINGS if key_bindings is None else key_bindings
        self._event_source = event_source or pygame.event.get

        self._keys_held = set()
        self._keys_pressed = set()
        self._keys_released = set()

        self._buttons_held = set()
        self._buttons_pressed = set()
        self._buttons_released = set()

        self.mouse_position = (0, 0)
        self.quit_requested = False

        self._actions = {
            action: {"pressed": False, "held": False, "released": False}
            for action in self.key_bindings
        }

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self):
        """Drain pending events and refresh the snapshot. Call once per tick."""
        self._keys_pressed.clear()
        self._keys_released.clear()
        self._buttons_pressed.clear()
        self._buttons_released.clear()

        for event in self._event_source():
            self._handle_event(event)

        self._update_actions()

    def _handle_event(self, event):
        if event.type == pygame.QUIT:
            if not self.quit_requested:
                DebugLogger.action("Quit signal received", category="input")
            self.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            if event.key not in self._keys_held:
                self._keys_pressed.add(event.key)
            self._keys_held.add(event.key)

        elif event.type == pygame.KEYUP:
            if event.key in self._keys_held:
                self._keys_released.add(event.key)
            self._keys_held.discard(event.key)

        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.mouse_position = event.pos
            if event.button not in self._buttons_held:
                self._buttons_pressed.add(event.button)
            self._buttons_held.add(event.button)

        elif event.type == pygame.MOUSEBUTTONUP:
            self.mouse_position = event.pos
            if event.button in self._buttons_held:
                self._buttons_released.add(event.button)
            self._buttons_held.discard(event.button)

        elif event.type == pygame.MOUSEMOTION:
            self.mouse_position = event.pos

    def _update_actions(self):
        """
        Derive action state from bound keys.

        - pressed: any bound key went down this tick
        - released: last held key came up this tick
        - held: any bound key is down
        """
        for action, keys in self.key_bindings.items():
            state = self._actions[action]
            held = any(k in self._keys_held for k in keys)
            pressed = any(k in self._keys_pressed for k in keys)
            released = any(k in self._keys_released for k in keys)

            state["pressed"] = pressed
            state["released"] = released and not held
            state["held"] = held

    # ===========================================================
    # Public API: Key Queries
    # ===========================================================

    def is_key_pressed(self, key: int) -> bool:
        """Key went down during the last tick."""
        return key in self._keys_pressed

    def is_key_held(self, key: int) -> bool:
        return key in self._keys_held

    def is_key_released(self, key: int) -> bool:
        """Key came up during the last tick."""
        return key in self._keys_released

    # ===========================================================
    # Public API: Mouse Queries
    # ===========================================================

    def is_mouse_pressed(self, button: int = 1) -> bool:
        return button in self._buttons_pressed

    def is_mouse_held(self, button: int = 1) -> bool:
        return button in self._buttons_held

    def is_mouse_released(self, button: int = 1) -> bool:
        return button in self._buttons_released

    # ===========================================================
    # Public API: Action Queries
    # ===========================================================

    def action_pressed(self, action: str) -> bool:
        state = self._actions.get(action)
        return state["pressed"] if state else False

    def action_held(self, action: str) -> bool:
        state = self._actions.get(action)
        return state["held"] if state else False

    def action_released(self, action: str) -> bool:
        state = self._actions.get(action)
        return state["released"] if state else False
