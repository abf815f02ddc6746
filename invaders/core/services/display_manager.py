"""
display_manager.py
------------------
Window management and integer-scaled presentation of the game surface.

Responsibilities:
- Window creation
- Owning the logical game surface the renderer draws on
- Scaling the game surface up to the window each frame
"""

import pygame

from invaders.core.debug.debug_logger import DebugLogger


class DisplayManager:
    """
    Manages the window and the logical game surface.

    The simulation works in small logical units (a 200x200 field); the
    game surface is drawn at that size and scaled by an integer factor.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, game_width=200, game_height=200, scale=3, caption="Invaders"):
        """
        Args:
            game_width: Logical game resolution width
            game_height: Logical game resolution height
            scale: Integer window scale factor
            caption: Window title
        """
        DebugLogger.init_entry("DisplayManager")

        self.game_width = game_width
        self.game_height = game_height
        self.scale = max(1, int(scale))
        self.game_surface = pygame.Surface((game_width, game_height))

        self.window_size = (game_width * self.scale, game_height * self.scale)
        self.window = pygame.display.set_mode(self.window_size)
        pygame.display.set_caption(caption)

        DebugLogger.init_sub(
            f"Windowed ({self.window_size[0]}x{self.window_size[1]}, x{self.scale})",
            level=1
        )

    # ===========================================================
    # Rendering
    # ===========================================================

    def get_game_surface(self) -> pygame.Surface:
        """Surface the renderer draws on, in game coordinates."""
        return self.game_surface

    def render(self):
        """Scale the game surface to the window and present it."""
        if self.scale == 1:
            self.window.blit(self.game_surface, (0, 0))
        else:
            pygame.transform.scale(self.game_surface, self.window_size, self.window)
        pygame.display.flip()
