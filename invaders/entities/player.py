"""
player.py
---------
Player-controlled ship.

Responsibilities
----------------
- Move horizontally while LEFT or RIGHT is held (LEFT wins if both are).
- Fire an upward projectile every frame FIRE is held.
- Restart the shoot sound on each shot.
"""

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.runtime.game_settings import PlayerDefaults
from invaders.core.services.input_manager import Keys
from invaders.entities.base_entity import BaseEntity
from invaders.entities.entity_types import EntityCategory
from invaders.entities.projectile import Projectile


class Player(BaseEntity):
    """Ship driven by an injected input source."""

    category = EntityCategory.PLAYER

    __slots__ = ('input_manager', 'population', 'shoot_cue', 'move_step', 'shot_velocity')

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, x, y, input_manager, population, shoot_cue=None,
                 size=PlayerDefaults.SIZE):
        """
        Args:
            x, y: Spawn center
            input_manager: Object exposing is_down(Keys)
            population: PopulationManager receiving fired projectiles
            shoot_cue: Sound played on every shot (optional)
        """
        super().__init__(x, y, size)
        self.input_manager = input_manager
        self.population = population
        self.shoot_cue = shoot_cue
        self.move_step = PlayerDefaults.MOVE_STEP
        self.shot_velocity = PlayerDefaults.SHOT_VELOCITY

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self):
        if self.input_manager.is_down(Keys.LEFT):
            self.center.x -= self.move_step
        elif self.input_manager.is_down(Keys.RIGHT):
            self.center.x += self.move_step

        if self.input_manager.is_down(Keys.FIRE):
            self.fire()

    def fire(self):
        """Spawn a projectile just above the ship's center and play the cue."""
        projectile = Projectile(
            self.center.x,
            self.center.y - self.size.x / 2,
            self.shot_velocity
        )
        self.population.add_entity(projectile)

        if self.shoot_cue is not None:
            self.shoot_cue.play()

        DebugLogger.trace(f"Fired {projectile}", category="entity_spawn")
        return projectile
