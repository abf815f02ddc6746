"""
test_draw_manager.py
--------------------
Tests for the rectangle renderer on an off-screen surface.
"""

import pygame

from invaders.core.runtime.game_settings import Colors
from invaders.entities.base_entity import BaseEntity
from invaders.entities.projectile import Projectile
from invaders.graphics.draw_manager import DrawManager


def test_entity_rect_is_centered():
    rect = DrawManager.entity_rect(BaseEntity(50, 90, (10, 10)))
    assert (rect.x, rect.y, rect.width, rect.height) == (45, 85, 10, 10)


def test_projectile_rect_is_at_least_one_pixel():
    rect = DrawManager.entity_rect(Projectile(10, 10, (0, 0)))
    assert rect.width == 1 and rect.height == 1


def test_render_clears_then_draws():
    surface = pygame.Surface((20, 20))
    surface.fill((255, 0, 0))
    manager = DrawManager()

    manager.render(surface, [BaseEntity(10, 10, (4, 4))])

    assert tuple(surface.get_at((0, 0)))[:3] == Colors.BACKGROUND
    assert tuple(surface.get_at((10, 10)))[:3] == Colors.ENTITY
    assert tuple(surface.get_at((8, 8)))[:3] == Colors.ENTITY
    assert tuple(surface.get_at((12, 12)))[:3] == Colors.BACKGROUND


def test_render_empty_population_only_clears():
    surface = pygame.Surface((5, 5))
    surface.fill((1, 2, 3))
    DrawManager().render(surface, [])
    assert tuple(surface.get_at((2, 2)))[:3] == Colors.BACKGROUND
