# tests/test_spawning.py
import random

import pytest
from pyquarium import spawning
from pyquarium.base import Bounds, Direction
from pyquarium.manager import EntityManager

BOUNDS = Bounds(80, 24)
LARGE_TYPES = {"shark", "whale", "ship", "sea_monster", "big_fish"}


def make_manager(seed=1, classic=False):
    return EntityManager(classic=classic, rng=random.Random(seed))


def large_creatures(manager):
    return [e for e in manager.entities() if e.entity_type in LARGE_TYPES]


class TestTargets:
    @pytest.mark.parametrize("width,height,expected", [
        (80, 24, 3),
        (120, 40, 10),
        (80, 9, 0),
        (10, 5, 0),
    ])
    def test_fish_target(self, width, height, expected):
        assert spawning.fish_target(Bounds(width, height)) == expected

    @pytest.mark.parametrize("width,expected", [(80, 5), (120, 8), (10, 1)])
    def test_seaweed_target(self, width, expected):
        assert spawning.seaweed_target(Bounds(width, 24)) == expected


class TestInitialize:
    def test_standard_screen(self):
        manager = make_manager()
        spawning.initialize_aquarium(manager, BOUNDS)

        assert len(manager.get_entities_by_type("fish")) == 3
        assert len(manager.get_entities_by_type("seaweed")) == 5

        castles = manager.get_entities_by_type("castle")
        assert len(castles) == 1
        assert (castles[0].position.x, castles[0].position.y) == (48, 11)

        water = manager.get_entities_by_type("water_surface")
        assert sorted(w.position.y for w in water) == [5, 6, 7, 8]

        assert len(large_creatures(manager)) == 1
        assert manager.has_large_creature()

    def test_fish_alternate_direction_by_id(self):
        manager = make_manager(2)
        spawning.initialize_aquarium(manager, BOUNDS)
        for fish in manager.get_entities_by_type("fish"):
            expected = Direction.RIGHT if fish.id % 2 == 0 else Direction.LEFT
            assert fish.direction is expected

    def test_tiny_screen_still_has_seaweed(self):
        manager = make_manager()
        spawning.initialize_aquarium(manager, Bounds(10, 5))
        assert manager.get_entities_by_type("fish") == []
        assert len(manager.get_entities_by_type("seaweed")) == 1


class TestLargeCreatures:
    def test_only_one_at_a_time(self):
        manager = make_manager()
        first = spawning.random_object(manager, BOUNDS)
        assert first is not None
        assert spawning.random_object(manager, BOUNDS) is None
        assert len(large_creatures(manager)) == 1

    @pytest.mark.parametrize("spawn", spawning.LARGE_CREATURES)
    def test_each_spawner_respects_the_slot(self, spawn):
        manager = make_manager()
        spawning.add_ship(manager, BOUNDS)
        assert spawn(manager, BOUNDS) is None
        assert len(large_creatures(manager)) == 1

    @pytest.mark.parametrize("spawn,entity_type", [
        (spawning.add_ship, "ship"),
        (spawning.add_whale, "whale"),
        (spawning.add_sea_monster, "sea_monster"),
        (spawning.add_big_fish, "big_fish"),
        (spawning.add_shark, "shark"),
    ])
    def test_spawner_fills_slot(self, spawn, entity_type):
        manager = make_manager()
        entity_id = spawn(manager, BOUNDS)
        assert manager.large_creature.id == entity_id
        assert manager.large_creature.entity_type == entity_type

    def test_shark_and_teeth_linked(self):
        manager = make_manager(4)
        shark_id = spawning.add_shark(manager, BOUNDS)
        shark = manager.get(shark_id)
        teeth = manager.get(shark.teeth_id)
        assert teeth.entity_type == "shark_teeth"
        assert teeth.shark_id == shark_id
        expected = shark.teeth_position()
        assert (teeth.position.x, teeth.position.y) == (expected.x, expected.y)
        assert teeth.velocity.dx == shark.velocity.dx

    def test_random_object_uses_every_kind(self):
        seen = set()
        for seed in range(60):
            manager = make_manager(seed)
            spawning.random_object(manager, BOUNDS)
            seen.add(manager.large_creature.entity_type)
        assert seen == LARGE_TYPES


class TestSmallSpawns:
    def test_bubble_from_fish(self):
        manager = make_manager()
        fish = manager.get(spawning.add_fish(manager, BOUNDS))
        bubble = manager.get(spawning.add_bubble(manager, fish))
        expected = fish.bubble_position()
        assert bubble.entity_type == "bubble"
        assert (bubble.position.x, bubble.position.y) == (expected.x, expected.y)
        assert bubble.depth == fish.depth - 1

    def test_fish_direction_follows_assigned_id(self):
        manager = make_manager()
        manager.add_entity(spawning.Castle(BOUNDS))
        fish = manager.get(spawning.add_fish(manager, BOUNDS))
        assert fish.id == 2
        assert fish.direction is Direction.RIGHT

    def test_classic_flag_reaches_fish(self):
        manager = make_manager(classic=True)
        for _ in range(30):
            spawning.add_fish(manager, BOUNDS)
        assert not any(f.species.is_new for f in manager.get_entities_by_type("fish"))
