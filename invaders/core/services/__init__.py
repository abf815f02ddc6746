"""
Core services exports.

Provides configuration loading, keyboard input and window management.
"""

from invaders.core.services.config_manager import load_config
from invaders.core.services.input_manager import InputManager, Keys
from invaders.core.services.display_manager import DisplayManager

__all__ = [
    # Config
    'load_config',
    # Services
    'InputManager',
    'Keys',
    'DisplayManager',
]
