"""Entity types."""

from enum import Enum


class EntityCategory(Enum):
    """
    Variant tag carried by every entity.

    Used for capability queries (e.g. BaseEntity.is_enemy) instead of
    isinstance checks against concrete classes.
    """
    PLAYER = "player"
    ENEMY = "enemy"
    PROJECTILE = "projectile"
