"""
test_spawn_manager.py
---------------------
Tests for the initial population: enemy formation and player placement.
"""

import random

from invaders.core.runtime.game_settings import Display
from invaders.entities.entity_types import EntityCategory
from invaders.systems.entity_management.spawn_manager import SpawnManager


class TestFormation:

    def test_formation_positions_are_distinct(self):
        positions = SpawnManager.formation_positions()
        assert len(positions) == 24
        assert len(set(positions)) == 24

    def test_formation_columns_and_rows(self):
        positions = SpawnManager.formation_positions()
        assert sorted({x for x, _ in positions}) == [30, 50, 70, 90, 110, 130, 150, 170]
        assert sorted({y for _, y in positions}) == [30, 50, 70]

    def test_formation_follows_modulo_rule(self):
        positions = SpawnManager.formation_positions()
        for i, (x, y) in enumerate(positions):
            assert x == 30 + (i % 8) * 20
            assert y == 30 + (i % 3) * 20

    def test_spawn_enemy_grid_adds_enemies(self, population):
        spawner = SpawnManager(population, rng=random.Random(1))
        enemies = spawner.spawn_enemy_grid()

        assert population.count(EntityCategory.ENEMY) == 24
        assert population.entities == enemies
        assert all(enemy.rng is spawner.rng for enemy in enemies)

    def test_formation_has_no_initial_overlaps(self, population):
        SpawnManager(population).spawn_enemy_grid()
        assert population.collision_manager.detect(population.entities) == set()


class TestPlayerSpawn:

    def test_player_at_bottom_center(self, population, held_keys, mock_shoot_cue):
        spawner = SpawnManager(population)
        player = spawner.spawn_player(held_keys, mock_shoot_cue)

        assert player.center.x == Display.WIDTH / 2
        assert player.center.y == Display.HEIGHT - 10
        assert player.input_manager is held_keys
        assert player.shoot_cue is mock_shoot_cue

    def test_spawn_initial(self, population, held_keys):
        player = SpawnManager(population).spawn_initial(held_keys, field_width=300, field_height=150)

        assert len(population) == 25
        assert population.count(EntityCategory.PLAYER) == 1
        assert (player.center.x, player.center.y) == (150, 140)

    def test_initial_population_survives_first_step(self, population, held_keys, quiet_rng):
        SpawnManager(population, rng=quiet_rng).spawn_initial(held_keys)

        assert population.step() == []
        assert len(population) == 25
