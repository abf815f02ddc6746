"""
conftest.py
-----------
Shared pytest configuration and fixtures for invaders tests.

Contains:
- Headless SDL setup so pygame never opens a window or audio device
- Common fixtures for input, audio and population collaborators
- Pytest marker registration
"""

import os

# Must be set before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
from unittest.mock import MagicMock

from invaders.core.debug.debug_logger import LoggerConfig
from invaders.core.services.input_manager import Keys
from invaders.systems.entity_management.population_manager import PopulationManager


# ===========================================================
# Logging
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger():
    """Silence console logging for every test, restoring it afterwards."""
    previous = LoggerConfig.ENABLE_LOGGING
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING = previous


# ===========================================================
# Test Doubles
# ===========================================================

class FixedRandom:
    """random.Random stand-in returning queued values, then a default."""

    def __init__(self, values=(), default=0.0):
        self.values = list(values)
        self.default = default
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.default


class HeldKeys:
    """Input source whose held keys are set directly by the test."""

    def __init__(self, *keys):
        self.held = set(keys)

    def is_down(self, key):
        return key in self.held


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def population():
    """Empty PopulationManager with the real collision manager."""
    return PopulationManager()


@pytest.fixture
def held_keys():
    """Input source with nothing held."""
    return HeldKeys()


@pytest.fixture
def fire_keys():
    """Input source with only FIRE held."""
    return HeldKeys(Keys.FIRE)


@pytest.fixture
def mock_shoot_cue():
    """Mock for the shoot SoundCue."""
    cue = MagicMock()
    cue.play = MagicMock()
    return cue


@pytest.fixture
def quiet_rng():
    """Random source that never triggers enemy fire."""
    return FixedRandom(default=0.0)


@pytest.fixture
def make_rng():
    """Factory for FixedRandom sources."""
    return FixedRandom


@pytest.fixture
def make_keys():
    """Factory for HeldKeys input sources."""
    return HeldKeys


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside an integration module as a unit test."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)

