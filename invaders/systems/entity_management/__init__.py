"""
Entity management system exports.

Provides the live population container and the initial spawner.
"""

from invaders.systems.entity_management.population_manager import PopulationManager
from invaders.systems.entity_management.spawn_manager import SpawnManager

__all__ = [
    'PopulationManager',
    'SpawnManager',
]
