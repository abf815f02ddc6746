"""
enemy.py
--------
Patrolling enemy that occasionally fires downward.

Responsibilities
----------------
- Drift sideways, reversing once its patrol offset leaves [0, 40].
- Fire a jittered downward projectile with ~0.5% chance per frame,
  unless another enemy is below it in its firing column.
"""

import random

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.runtime.game_settings import EnemyDefaults
from invaders.entities.base_entity import BaseEntity
from invaders.entities.entity_types import EntityCategory
from invaders.entities.projectile import Projectile


class Enemy(BaseEntity):
    """Grid enemy with a bouncing horizontal patrol."""

    category = EntityCategory.ENEMY

    __slots__ = ('population', 'rng', 'patrol_x', 'speed_x')

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, x, y, population, rng=None, size=EnemyDefaults.SIZE,
                 speed_x=EnemyDefaults.SPEED_X):
        """
        Args:
            x, y: Spawn center
            population: PopulationManager used for the clear-shot query and
                for adding projectiles
            rng: random.Random used for fire decisions and shot jitter
            speed_x: Initial signed horizontal speed per frame
        """
        super().__init__(x, y, size)
        self.population = population
        self.rng = rng or random.Random()
        self.patrol_x = 0.0
        self.speed_x = speed_x

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self):
        # Bounds are exclusive and checked before moving, so an enemy that
        # lands exactly on 0 or 40 reverses on the following frame.
        if self.patrol_x < EnemyDefaults.PATROL_MIN or self.patrol_x > EnemyDefaults.PATROL_MAX:
            self.speed_x = -self.speed_x

        self.center.x += self.speed_x
        self.patrol_x += self.speed_x

        if self.rng.random() > EnemyDefaults.FIRE_THRESHOLD and not self.population.enemies_below(self):
            self.fire()

    def fire(self):
        """Spawn a projectile below the enemy with random sideways drift."""
        velocity = (
            self.rng.random() - EnemyDefaults.SHOT_JITTER,
            EnemyDefaults.SHOT_SPEED_Y
        )
        projectile = Projectile(self.center.x, self.center.y + self.size.x * 2, velocity)
        self.population.add_entity(projectile)

        DebugLogger.trace(f"Enemy fired {projectile}", category="entity_spawn")
        return projectile
