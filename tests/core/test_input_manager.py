"""
test_input_manager.py
---------------------
Tests for the keyboard state source.
"""

import pygame
import pytest

from invaders.core.services.input_manager import InputManager, Keys


def key_event(event_type, key):
    return pygame.event.Event(event_type, key=key)


@pytest.fixture
def input_manager():
    return InputManager()


def test_nothing_held_initially(input_manager):
    assert not any(input_manager.is_down(key) for key in Keys)


def test_keydown_then_keyup(input_manager):
    assert input_manager.handle_event(key_event(pygame.KEYDOWN, pygame.K_SPACE))
    assert input_manager.is_down(Keys.FIRE)

    assert input_manager.handle_event(key_event(pygame.KEYUP, pygame.K_SPACE))
    assert not input_manager.is_down(Keys.FIRE)


def test_state_persists_while_held(input_manager):
    input_manager.handle_event(key_event(pygame.KEYDOWN, pygame.K_LEFT))
    for _ in range(3):
        assert input_manager.is_down(Keys.LEFT)


@pytest.mark.parametrize("code, key", [
    (pygame.K_LEFT, Keys.LEFT),
    (pygame.K_a, Keys.LEFT),
    (pygame.K_RIGHT, Keys.RIGHT),
    (pygame.K_d, Keys.RIGHT),
])
def test_default_bindings(input_manager, code, key):
    input_manager.handle_event(key_event(pygame.KEYDOWN, code))
    assert input_manager.is_down(key)


def test_alternate_key_keeps_action_held(input_manager):
    input_manager.handle_event(key_event(pygame.KEYDOWN, pygame.K_LEFT))
    input_manager.handle_event(key_event(pygame.KEYDOWN, pygame.K_a))
    input_manager.handle_event(key_event(pygame.KEYUP, pygame.K_LEFT))
    assert input_manager.is_down(Keys.LEFT)


def test_unbound_key_is_ignored(input_manager):
    assert not input_manager.handle_event(key_event(pygame.KEYDOWN, pygame.K_q))
    assert not any(input_manager.is_down(key) for key in Keys)


def test_non_key_event_is_ignored(input_manager):
    assert not input_manager.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))


def test_reset_releases_everything(input_manager):
    input_manager.handle_event(key_event(pygame.KEYDOWN, pygame.K_RIGHT))
    input_manager.handle_event(key_event(pygame.KEYDOWN, pygame.K_SPACE))
    input_manager.reset()
    assert not input_manager.is_down(Keys.RIGHT)
    assert not input_manager.is_down(Keys.FIRE)


def test_custom_bindings():
    manager = InputManager({Keys.FIRE: [pygame.K_z], Keys.LEFT: [], Keys.RIGHT: []})
    manager.handle_event(key_event(pygame.KEYDOWN, pygame.K_z))
    assert manager.is_down(Keys.FIRE)
    assert not manager.handle_event(key_event(pygame.KEYDOWN, pygame.K_SPACE))
