"""
spawn_manager.py
----------------
Builds the starting population: one player and the enemy formation.
"""

import random

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.runtime.game_settings import Display, Formation, PlayerDefaults
from invaders.entities.enemy import Enemy
from invaders.entities.player import Player


class SpawnManager:
    """
    Creates entities and registers them with a PopulationManager.

    All enemies share one random.Random so a seeded run is reproducible.
    """

    def __init__(self, population, rng=None):
        """
        Args:
            population: PopulationManager receiving spawned entities
            rng: Shared random source for enemy fire decisions
        """
        self.population = population
        self.rng = rng or random.Random()

        DebugLogger.init_entry("SpawnManager")

    # ===========================================================
    # Formation
    # ===========================================================
    @staticmethod
    def formation_positions(count=Formation.COUNT):
        """
        Grid slot centers for the enemy formation.

        Slot i sits in column i % COLUMNS and row i % ROWS. With 24 enemies,
        8 columns and 3 rows every (column, row) pair occurs exactly once.
        """
        origin_x, origin_y = Formation.ORIGIN
        return [
            (origin_x + (i % Formation.COLUMNS) * Formation.SPACING,
             origin_y + (i % Formation.ROWS) * Formation.SPACING)
            for i in range(count)
        ]

    def spawn_enemy_grid(self, count=Formation.COUNT):
        """Create the enemy formation and add it to the population."""
        enemies = [
            Enemy(x, y, self.population, rng=self.rng)
            for x, y in self.formation_positions(count)
        ]
        for enemy in enemies:
            self.population.add_entity(enemy)

        DebugLogger.system(f"Spawned {len(enemies)} enemies", category="entity_spawn")
        return enemies

    # ===========================================================
    # Player
    # ===========================================================
    def spawn_player(self, input_manager, shoot_cue=None,
                     field_width=Display.WIDTH, field_height=Display.HEIGHT):
        """Create the player centered at the bottom of the field."""
        player = Player(
            field_width / 2,
            field_height - PlayerDefaults.SIZE[0],
            input_manager,
            self.population,
            shoot_cue=shoot_cue
        )
        self.population.add_entity(player)

        DebugLogger.system(
            f"Spawned player at ({player.center.x:g}, {player.center.y:g})",
            category="entity_spawn"
        )
        return player

    def spawn_initial(self, input_manager, shoot_cue=None,
                      field_width=Display.WIDTH, field_height=Display.HEIGHT):
        """Enemy formation first, then the player."""
        self.spawn_enemy_grid()
        return self.spawn_player(input_manager, shoot_cue, field_width, field_height)
