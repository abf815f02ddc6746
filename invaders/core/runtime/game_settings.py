"""
game_settings.py
----------------
Centralized constants for all game systems.

Speeds are per-frame values: the simulation is stepped once per display
frame and never scaled by elapsed time.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 200
    HEIGHT: int = 200
    SCALE: int = 3
    FPS: int = 60
    CAPTION: str = "Invaders"


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """Fill colors used by the renderer."""
    BACKGROUND = (0, 0, 0)
    ENTITY = (255, 255, 255)


# ===========================================================
# Entity Defaults
# ===========================================================

class PlayerDefaults:
    """Player ship configuration."""
    SIZE = (10, 10)
    MOVE_STEP: float = 2.0
    SHOT_VELOCITY = (0.0, -0.9)


class EnemyDefaults:
    """Enemy patrol and firing configuration."""
    SIZE = (5, 5)
    SPEED_X: float = 0.3
    PATROL_MIN: float = 0.0
    PATROL_MAX: float = 40.0
    FIRE_THRESHOLD: float = 0.995
    SHOT_SPEED_Y: float = 2.0
    SHOT_JITTER: float = 0.5


class ProjectileDefaults:
    """Projectile configuration."""
    SIZE = (1, 1)


class Formation:
    """Initial enemy grid layout."""
    COUNT: int = 24
    COLUMNS: int = 8
    ROWS: int = 3
    ORIGIN = (30, 30)
    SPACING: int = 20


# ===========================================================
# Audio
# ===========================================================

class Audio:
    """Sound asset configuration."""
    ENABLED: bool = True
    SHOOT_SOUND: str = "assets/audio/shoot.wav"
    VOLUME: float = 0.5


# ===========================================================
# Collision
# ===========================================================

class Collision:
    """Broad-phase tuning."""
    CELL_SIZE: int = 16
