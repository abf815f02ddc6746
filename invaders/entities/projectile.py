"""
projectile.py
-------------
Straight-line projectile fired by the player or an enemy.

Projectiles never expire on their own: they fly until they hit something,
including long after they have left the visible field.
"""

import pygame

from invaders.core.runtime.game_settings import ProjectileDefaults
from invaders.entities.base_entity import BaseEntity
from invaders.entities.entity_types import EntityCategory


class Projectile(BaseEntity):
    """Moves by a constant velocity every frame."""

    category = EntityCategory.PROJECTILE

    __slots__ = ('velocity',)

    def __init__(self, x: float, y: float, velocity, size=ProjectileDefaults.SIZE):
        """
        Args:
            x, y: Spawn center
            velocity: (vx, vy) added to the center each frame
        """
        super().__init__(x, y, size)
        self.velocity = pygame.Vector2(velocity)

    def update(self):
        self.center += self.velocity
