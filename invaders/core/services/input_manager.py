"""
input_manager.py
----------------
Keyboard state source for gameplay actions.

Provides:
- Logical keys (LEFT, RIGHT, FIRE) mapped to one or more physical keys
- Last-known-state queries (holding a key keeps the action active)
- Explicit event feeding from the frame driver's event pump
"""

from enum import Enum

import pygame

from invaders.core.debug.debug_logger import DebugLogger


class Keys(Enum):
    """Logical gameplay keys."""
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    Keys.LEFT: [pygame.K_LEFT, pygame.K_a],
    Keys.RIGHT: [pygame.K_RIGHT, pygame.K_d],
    Keys.FIRE: [pygame.K_SPACE],
}


class InputManager:
    """
    Tracks which logical keys are held.

    The frame driver forwards KEYDOWN/KEYUP events through handle_event();
    entities query is_down() during their update.

    Usage:
        if input_manager.is_down(Keys.FIRE):
            player.fire()
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: Custom {Keys: [pygame key codes]} mapping
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS

        # Build reverse lookup for O(1) event routing
        self._key_to_action = {}
        for action, codes in self.key_bindings.items():
            for code in codes:
                self._key_to_action[code] = action

        self._held_codes = set()

        DebugLogger.init_entry("InputManager")

    # ===========================================================
    # Event Feeding
    # ===========================================================

    def handle_event(self, event) -> bool:
        """
        Update key state from a pygame event.

        Returns:
            bool: True if the event was a bound key press/release
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        action = self._key_to_action.get(event.key)
        if action is None:
            return False

        if event.type == pygame.KEYDOWN:
            self._held_codes.add(event.key)
        else:
            self._held_codes.discard(event.key)

        DebugLogger.trace(
            f"{action.name} {'down' if self.is_down(action) else 'up'}",
            category="input"
        )
        return True

    def reset(self):
        """Release every key (e.g. when the window loses focus)."""
        self._held_codes.clear()

    # ===========================================================
    # Public API
    # ===========================================================

    def is_down(self, key: Keys) -> bool:
        """Check if any physical key bound to the logical key is held."""
        return any(code in self._held_codes for code in self.key_bindings.get(key, ()))
