"""
population_manager.py
---------------------
Owner of every live entity and the per-frame simulation step.

Responsibilities
----------------
- Hold the ordered list of live entities (membership == existence).
- Each step: cull every entity that overlaps another, then update the
  survivors.
- Buffer entities added while a step is running so they first take part
  in the following step.
- Answer the enemies' clear-shot query.
"""

from invaders.core.debug.debug_logger import DebugLogger
from invaders.systems.collision.collision_manager import CollisionManager


class PopulationManager:
    """
    Centralized container for the simulated entities.

    Collision decisions for one step are all taken from the same pre-step
    snapshot, so removal never cascades within a step.
    """

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, collision_manager=None):
        """
        Args:
            collision_manager (optional): Detector used for the culling pass.
        """
        self.collision_manager = collision_manager or CollisionManager()
        self._entities = []
        self._pending = []
        self._stepping = False
        self.frame = 0

        DebugLogger.init_entry("PopulationManager")

    # ===========================================================
    # Membership
    # ===========================================================
    @property
    def entities(self):
        """Copy of the live entity list, in insertion order."""
        return list(self._entities)

    def __len__(self):
        return len(self._entities)

    def __iter__(self):
        return iter(list(self._entities))

    def count(self, category) -> int:
        """Number of live entities tagged with the given EntityCategory."""
        return sum(1 for e in self._entities if e.category is category)

    def add_entity(self, entity):
        """
        Add an entity to the population.

        During a step the entity is queued and merged once the update pass
        has finished.
        """
        if self._stepping:
            self._pending.append(entity)
        else:
            self._entities.append(entity)

    # ===========================================================
    # Simulation Step
    # ===========================================================
    def step(self):
        """
        Advance the simulation by one frame.

        Returns:
            list: Entities removed by the culling pass
        """
        snapshot = self._entities
        hit = self.collision_manager.detect(snapshot)

        survivors = [e for e in snapshot if id(e) not in hit]
        removed = [e for e in snapshot if id(e) in hit]
        self._entities = survivors

        if removed:
            self._log_removed(removed)

        self._stepping = True
        try:
            for entity in survivors:
                entity.update()
        finally:
            self._stepping = False
            self._entities.extend(self._pending)
            self._pending.clear()

        self.frame += 1
        return removed

    def _log_removed(self, removed):
        DebugLogger.trace(
            f"Frame {self.frame}: culled {len(removed)} entities",
            category="population"
        )
        for entity in removed:
            if entity.is_player():
                DebugLogger.warn(f"Player destroyed at frame {self.frame}", category="population")

    # ===========================================================
    # Tactical Queries
    # ===========================================================
    def enemies_below(self, enemy) -> bool:
        """
        True if another enemy blocks this enemy's shot.

        The horizontal test is one-sided: every lower enemy to the left counts,
        whatever its distance, while on the right only those closer than the
        enemy's width do.
        """
        return any(
            other.is_enemy() and
            other.center.y > enemy.center.y and
            other.center.x - enemy.center.x < enemy.size.x
            for other in self._entities
        )
