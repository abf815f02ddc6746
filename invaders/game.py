"""
game.py
-------
Startup: loads settings, builds the systems and the initial population,
loads the shoot sound, then hands control to the frame loop.
"""

import random

import pygame

from invaders.audio.sound_manager import AudioLoadError, MutedCue, SoundCue
from invaders.core.debug.debug_logger import DebugLogger, LoggerConfig
from invaders.core.runtime.game_settings import Audio, Display
from invaders.core.runtime.main_loop import MainLoop
from invaders.core.services.config_manager import load_config
from invaders.core.services.display_manager import DisplayManager
from invaders.core.services.input_manager import InputManager
from invaders.graphics.draw_manager import DrawManager
from invaders.systems.entity_management.population_manager import PopulationManager
from invaders.systems.entity_management.spawn_manager import SpawnManager


DEFAULT_CONFIG = {
    "display": {
        "scale": Display.SCALE,
        "fps": Display.FPS,
        "caption": Display.CAPTION,
    },
    "audio": {
        "enabled": Audio.ENABLED,
        "shoot_sound": Audio.SHOOT_SOUND,
        "volume": Audio.VOLUME,
    },
    "logging": {
        "level": "INFO",
        "categories": {},
    },
}


class Game:
    """Owns every runtime system for one play session."""

    def __init__(self, config=None, seed=None, max_frames=None):
        """
        Args:
            config: Settings dict shaped like DEFAULT_CONFIG (defaults to
                settings.json merged onto DEFAULT_CONFIG)
            seed: Seed for enemy randomness (None = nondeterministic)
            max_frames: Optional frame limit for the loop
        """
        self.config = config if config is not None else load_config("settings.json", DEFAULT_CONFIG)
        self.seed = seed
        self.max_frames = max_frames

        logging_cfg = self.config.get("logging", {})
        LoggerConfig.configure(logging_cfg.get("level"), logging_cfg.get("categories"))

        self.display = None
        self.loop = None
        self.player = None

    # ===========================================================
    # Startup
    # ===========================================================

    def setup(self):
        """Build systems and population, then load audio. Raises AudioLoadError."""
        DebugLogger.section("Initializing Game")
        display_cfg = self.config["display"]

        pygame.init()
        DebugLogger.init_entry("Pygame")

        self.display = DisplayManager(
            Display.WIDTH,
            Display.HEIGHT,
            scale=display_cfg["scale"],
            caption=display_cfg["caption"]
        )
        self.input_manager = InputManager()
        self.draw_manager = DrawManager()
        self.population = PopulationManager()
        self.spawner = SpawnManager(self.population, rng=random.Random(self.seed))

        self.shoot_cue = self._load_audio()

        self.player = self.spawner.spawn_initial(
            self.input_manager,
            self.shoot_cue,
            field_width=Display.WIDTH,
            field_height=Display.HEIGHT
        )

        self.loop = MainLoop(
            self.population,
            self.input_manager,
            self.display,
            self.draw_manager,
            fps=display_cfg["fps"],
            max_frames=self.max_frames
        )
        return self

    def _load_audio(self):
        audio_cfg = self.config["audio"]
        if not audio_cfg["enabled"]:
            return MutedCue().load()

        cue = SoundCue(audio_cfg["shoot_sound"], volume=audio_cfg["volume"])
        try:
            return cue.load()
        except AudioLoadError as e:
            DebugLogger.fail(f"Startup aborted: {e}", category="audio")
            raise

    # ===========================================================
    # Run
    # ===========================================================

    def run(self):
        """Set up if needed, run the loop, always shut pygame down."""
        try:
            if self.loop is None:
                self.setup()
            return self.loop.run()
        finally:
            pygame.quit()
            DebugLogger.system("Pygame terminated")
