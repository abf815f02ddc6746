"""
base_entity.py
--------------
Foundational class for all simulated entities (Player, Enemy, Projectile).

Coordinate System
-----------------
All entities use center-based coordinates:
- self.center is the entity's physical center
- self.size is the full width/height; the box spans center ± size/2
- Collision and rendering only ever read center and size
"""

import pygame

from invaders.entities.entity_types import EntityCategory


class BaseEntity:
    """
    Base class for all game entities.

    Subclassed by Player, Enemy and Projectile.
    """

    category = None

    __slots__ = ('center', 'size')

    # ===================================================================
    # Initialization
    # ===================================================================

    def __init__(self, x: float, y: float, size):
        """
        Args:
            x: Center X position
            y: Center Y position
            size: (width, height) of the bounding box
        """
        self.center = pygame.Vector2(x, y)
        self.size = pygame.Vector2(size)

    # ===================================================================
    # Bounding Box
    # ===================================================================

    @property
    def left(self) -> float:
        return self.center.x - self.size.x / 2

    @property
    def right(self) -> float:
        return self.center.x + self.size.x / 2

    @property
    def top(self) -> float:
        return self.center.y - self.size.y / 2

    @property
    def bottom(self) -> float:
        return self.center.y + self.size.y / 2

    # ===================================================================
    # Capability Queries
    # ===================================================================

    def is_enemy(self) -> bool:
        return self.category is EntityCategory.ENEMY

    def is_player(self) -> bool:
        return self.category is EntityCategory.PLAYER

    # ===================================================================
    # Core Update Loop
    # ===================================================================

    def update(self):
        """Per-frame update. Override in subclasses."""
        pass

    def __repr__(self):
        return (
            f"{type(self).__name__}(center=({self.center.x:.2f}, {self.center.y:.2f}), "
            f"size=({self.size.x:g}, {self.size.y:g}))"
        )
