"""
collision_manager.py
--------------------
Axis-aligned box collision for the population culling pass.

Responsibilities
----------------
- Provide the colliding() predicate (center ± size/2 boxes, touching counts).
- Find every entity that overlaps at least one other entity in a snapshot,
  using a uniform-grid spatial hash so each entity is only tested against
  its neighbours.
"""

import math

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.runtime.game_settings import Collision


def colliding(b1, b2) -> bool:
    """
    True when the boxes of b1 and b2 overlap or touch.

    An entity never collides with itself. Only a strict gap on the x or y
    axis separates two boxes.
    """
    return not (
        b1 is b2 or
        b1.center.x + b1.size.x / 2 < b2.center.x - b2.size.x / 2 or
        b1.center.y + b1.size.y / 2 < b2.center.y - b2.size.y / 2 or
        b1.center.x - b1.size.x / 2 > b2.center.x + b2.size.x / 2 or
        b1.center.y - b1.size.y / 2 > b2.center.y + b2.size.y / 2
    )


class CollisionManager:
    """Detects overlaps; the population decides what to do with them."""

    def __init__(self, cell_size=Collision.CELL_SIZE):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.cell_size = cell_size
        self._grid = {}

        DebugLogger.init_entry("CollisionManager")

    # ===========================================================
    # Utility: Grid Assignment
    # ===========================================================
    def _cells_for(self, entity):
        """
        Yield every grid cell the entity's box touches.

        Cells are half-open [k*size, (k+1)*size); a box edge lying exactly on
        a cell boundary lands in the cell starting there, so two boxes that
        merely touch still share a cell.
        """
        size = self.cell_size
        start_x = math.floor(entity.left / size)
        end_x = math.floor(entity.right / size)
        start_y = math.floor(entity.top / size)
        end_y = math.floor(entity.bottom / size)

        for cx in range(start_x, end_x + 1):
            for cy in range(start_y, end_y + 1):
                yield cx, cy

    def _build_grid(self, entities):
        self._grid.clear()
        for entity in entities:
            for cell in self._cells_for(entity):
                bucket = self._grid.get(cell)
                if bucket is None:
                    self._grid[cell] = [entity]
                else:
                    bucket.append(entity)

    # ===========================================================
    # Detection
    # ===========================================================
    def detect(self, entities):
        """
        Find all entities overlapping at least one other entity.

        Args:
            entities: Snapshot sequence of entities

        Returns:
            set: id() of every colliding entity
        """
        self._build_grid(entities)

        hit = set()
        checked_pairs = set()

        for bucket in self._grid.values():
            if len(bucket) < 2:
                continue

            for i, a in enumerate(bucket):
                a_id = id(a)
                for b in bucket[i + 1:]:
                    b_id = id(b)
                    pair_key = (a_id, b_id) if a_id < b_id else (b_id, a_id)
                    if pair_key in checked_pairs:
                        continue
                    checked_pairs.add(pair_key)

                    if colliding(a, b):
                        hit.add(a_id)
                        hit.add(b_id)
                        DebugLogger.trace(f"{a!r} <-> {b!r}")

        self._grid.clear()
        return hit

    def is_colliding_with_any(self, entity, entities) -> bool:
        """Brute-force check of one entity against a sequence."""
        return any(colliding(entity, other) for other in entities)
