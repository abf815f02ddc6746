import os

import pygame

from invaders.core.debug.debug_logger import DebugLogger

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class AudioLoadError(RuntimeError):
    """The mixer could not start or a sound file could not be loaded."""


def resolve_asset(path):
    # relative paths are looked up inside the package first
    if os.path.isabs(path) or os.path.exists(path):
        return path
    return os.path.join(PACKAGE_ROOT, path)


class SoundCue:
    """One-shot effect that restarts from the beginning on every play()."""

    def __init__(self, path, volume=1.0):
        self.path = resolve_asset(path)
        self.volume = min(max(volume, 0.0), 1.0)
        self.sound = None

    def load(self):
        """Start the mixer if needed and load the file. Raises AudioLoadError."""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            self.sound = pygame.mixer.Sound(self.path)
        except (pygame.error, FileNotFoundError) as e:
            raise AudioLoadError(f"Could not load sound '{self.path}': {e}") from e

        self.sound.set_volume(self.volume)
        DebugLogger.system(f"Loaded {os.path.basename(self.path)}", category="audio")
        return self

    @property
    def ready(self):
        return self.sound is not None

    def play(self):
        if self.sound is None:
            DebugLogger.warn("play() before load()", category="audio")
            return
        # stop first so rapid fire cuts the previous shot off
        self.sound.stop()
        self.sound.play()

    def set_volume(self, volume):
        self.volume = min(max(volume, 0.0), 1.0)
        if self.sound is not None:
            self.sound.set_volume(self.volume)


class MutedCue:
    """Stand-in used when audio is disabled."""

    ready = True

    def load(self):
        DebugLogger.system("Audio disabled", category="audio")
        return self

    def play(self):
        pass
