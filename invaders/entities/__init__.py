"""
invaders/entities/__init__.py
-----------------------------
Entity module exports.

Exports:
    EntityCategory - Variant tag (PLAYER, ENEMY, PROJECTILE)
    BaseEntity     - Center/size box shared by every variant
    Player         - Keyboard-driven ship
    Enemy          - Patrolling grid enemy
    Projectile     - Constant-velocity shot
"""

from invaders.entities.entity_types import EntityCategory
from invaders.entities.base_entity import BaseEntity
from invaders.entities.projectile import Projectile
from invaders.entities.player import Player
from invaders.entities.enemy import Enemy

__all__ = [
    'EntityCategory',
    'BaseEntity',
    'Projectile',
    'Player',
    'Enemy',
]
