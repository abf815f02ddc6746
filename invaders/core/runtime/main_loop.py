"""
main_loop.py
------------
Frame driver: pumps events, steps the simulation and renders.

Responsibilities:
- Forward keyboard events to the InputManager
- Call PopulationManager.step() exactly once per frame
- Render the resulting entity list
- Stop on window close or after an optional frame limit
"""

import time

import pygame

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.runtime.game_settings import Display


class MainLoop:
    """
    Runs the game until quit.

    One simulation step per displayed frame; the clock only paces the loop,
    entity speeds are not scaled by elapsed time.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, population, input_manager, display, draw_manager,
                 fps=Display.FPS, max_frames=None):
        """
        Args:
            population: PopulationManager to step
            input_manager: InputManager fed from the event queue
            display: DisplayManager owning the window
            draw_manager: DrawManager that paints entities
            fps: Frame rate cap
            max_frames: Stop after this many frames (None = run until quit)
        """
        self.population = population
        self.input_manager = input_manager
        self.display = display
        self.draw_manager = draw_manager
        self.fps = fps
        self.max_frames = max_frames

        self.clock = pygame.time.Clock()
        self.running = False
        self.frames = 0
        self._last_perf_log = 0.0

        DebugLogger.init_entry("Main Loop Runtime")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Execute frames until quit or until max_frames is reached."""
        DebugLogger.section("Game Loop")
        self.running = True

        while self.running:
            self.tick()
            self.clock.tick(self.fps)

            if self.max_frames is not None and self.frames >= self.max_frames:
                DebugLogger.system(f"Frame limit reached ({self.frames})")
                self.running = False

        return self.frames

    def tick(self):
        """Handle events, step once, draw once."""
        self._handle_events()
        if not self.running:
            return

        self.population.step()
        self._draw()
        self.frames += 1
        self._log_timing()

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if event.type == pygame.WINDOWFOCUSLOST:
                self.input_manager.reset()
                continue

            self.input_manager.handle_event(event)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        surface = self.display.get_game_surface()
        self.draw_manager.render(surface, self.population.entities)
        self.display.render()

    def _log_timing(self):
        """Report FPS and population size about once per second."""
        now = time.perf_counter()
        if now - self._last_perf_log < 1.0:
            return
        self._last_perf_log = now
        DebugLogger.trace(
            f"FPS={self.clock.get_fps():.1f} | entities={len(self.population)}",
            category="timing"
        )
