"""
Runtime configuration exports.

Provides game-wide constants and the frame driver.
"""

from invaders.core.runtime.game_settings import (
    Display,
    Colors,
    PlayerDefaults,
    EnemyDefaults,
    ProjectileDefaults,
    Formation,
    Audio,
    Collision,
)

__all__ = [
    # Display & Rendering
    'Display',
    'Colors',
    # Entities
    'PlayerDefaults',
    'EnemyDefaults',
    'ProjectileDefaults',
    'Formation',
    # Systems
    'Audio',
    'Collision',
]
