"""
draw_manager.py
---------------
Renders the entity list as filled rectangles.

Responsibilities:
- Clear the previous frame
- Draw one box per entity at center - size/2, sized size
"""

import pygame

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.runtime.game_settings import Colors


class DrawManager:
    """Stateless rectangle renderer for the game surface."""

    def __init__(self, background=Colors.BACKGROUND, color=Colors.ENTITY):
        self.background = background
        self.color = color

        DebugLogger.init_entry("DrawManager")

    @staticmethod
    def entity_rect(entity) -> pygame.Rect:
        """Pixel rect of an entity's box (rounded to whole pixels)."""
        return pygame.Rect(
            round(entity.left),
            round(entity.top),
            max(1, round(entity.size.x)),
            max(1, round(entity.size.y))
        )

    def clear(self, surface):
        surface.fill(self.background)

    def render(self, surface, entities):
        """Clear the surface and draw every entity."""
        self.clear(surface)
        for entity in entities:
            pygame.draw.rect(surface, self.color, self.entity_rect(entity))
