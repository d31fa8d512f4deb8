# tests/test_aquarium.py
import random

import pytest
from pyquarium import spawning
from pyquarium.aquarium import Aquarium, KEY_HELP
from pyquarium.base import Bounds, Position
from pyquarium.buffer import Buffer
from pyquarium.entities import Shark
from pyquarium.manager import EntityManager

BOUNDS = Bounds(80, 24)


def make_aquarium(seed=5, bounds=BOUNDS, **kwargs):
    return Aquarium(bounds, rng=random.Random(seed), now=0.0, **kwargs)


def place_on(fish, x, y):
    """Move ``fish`` so one of its opaque cells lands on ``(x, y)``."""
    col, row, _ = next(fish.current_sprite().opaque_cells())
    fish.position.x = x - col
    fish.position.y = y - row


@pytest.fixture
def bite_scene():
    """An empty tank with one shark and one fish sitting on its teeth."""
    aquarium = make_aquarium()
    aquarium.manager = EntityManager(rng=random.Random(5))
    manager = aquarium.manager
    shark = manager.get(spawning.add_shark(manager, BOUNDS))
    teeth = manager.get(shark.teeth_id)
    teeth.position = Position(30, 12, teeth.depth)
    fish = manager.get(spawning.add_fish(manager, BOUNDS))
    place_on(fish, 30, 12)
    return aquarium, shark, teeth, fish


class TestSharkBites:
    def test_bite_kills_fish_teeth_and_shark(self, bite_scene):
        aquarium, shark, teeth, fish = bite_scene
        assert aquarium.handle_shark_collisions() == 1
        assert not fish.is_alive()
        assert not teeth.is_alive()
        assert not shark.is_alive()

    def test_victims_reaped_and_replaced_in_same_tick(self, bite_scene):
        aquarium, shark, teeth, fish = bite_scene
        aquarium.handle_shark_collisions()
        aquarium.tick(now=0.0)
        manager = aquarium.manager
        assert fish.id not in manager
        assert shark.id not in manager
        assert teeth.id not in manager
        assert len(manager.get_entities_by_type("fish")) == 1
        assert manager.has_large_creature()

    def test_tick_resolves_bites(self, bite_scene):
        aquarium, shark, _, fish = bite_scene
        aquarium.tick(now=0.0)
        assert fish.id not in aquarium.manager
        assert shark.id not in aquarium.manager

    def test_one_bite_kills_every_shark(self, bite_scene):
        aquarium, shark, _, _ = bite_scene
        other = Shark(BOUNDS, aquarium.manager.rng)
        aquarium.manager.add_entity(other)
        aquarium.handle_shark_collisions()
        assert not shark.is_alive()
        assert not other.is_alive()

    def test_no_bite_without_contact(self, bite_scene):
        aquarium, shark, teeth, fish = bite_scene
        fish.position.y = 20
        assert aquarium.handle_shark_collisions() == 0
        assert shark.is_alive()
        assert fish.is_alive()

    def test_other_collisions_ignored(self):
        aquarium = make_aquarium()
        aquarium.manager = EntityManager(rng=random.Random(6))
        manager = aquarium.manager
        a = manager.get(spawning.add_fish(manager, BOUNDS))
        b = manager.get(spawning.add_fish(manager, BOUNDS))
        place_on(a, 20, 15)
        place_on(b, 20, 15)
        assert aquarium.handle_shark_collisions() == 0
        assert a.is_alive() and b.is_alive()


class TestTick:
    def test_returns_elapsed_time(self):
        aquarium = make_aquarium()
        assert aquarium.tick(now=0.25) == pytest.approx(0.25)
        assert aquarium.last_update == 0.25

    def test_clock_going_backwards_is_zero(self):
        aquarium = make_aquarium()
        aquarium.tick(now=1.0)
        assert aquarium.tick(now=0.5) == 0.0

    def test_paused_tick_does_nothing(self):
        aquarium = make_aquarium()
        assert aquarium.toggle_pause() is True
        positions = [(e.position.x, e.position.y) for e in aquarium.manager.entities()]
        assert aquarium.tick(now=5.0) == 0.0
        assert [(e.position.x, e.position.y) for e in aquarium.manager.entities()] == positions
        assert aquarium.toggle_pause() is False

    def test_emit_bubbles(self):
        aquarium = make_aquarium()
        fish = aquarium.manager.get_entities_by_type("fish")
        for f in fish:
            f.bubble_timer = 0.0
        assert aquarium.emit_bubbles(0.1) == len(fish)
        assert len(aquarium.manager.get_entities_by_type("bubble")) == len(fish)

    def test_top_up_restores_fish(self):
        aquarium = make_aquarium()
        manager = aquarium.manager
        for fish in manager.get_entities_by_type("fish"):
            manager.remove_entity(fish.id)
        aquarium.top_up(1.0)
        assert manager.get_entities_by_type("fish") == []
        aquarium.top_up(2.0)
        assert len(manager.get_entities_by_type("fish")) == 1

    def test_top_up_restores_seaweed(self):
        aquarium = make_aquarium()
        manager = aquarium.manager
        weeds = manager.get_entities_by_type("seaweed")
        manager.remove_entity(weeds[0].id)
        aquarium.top_up(5.0)
        assert len(manager.get_entities_by_type("seaweed")) == len(weeds)

    def test_top_up_sends_shark_when_slot_empty(self):
        aquarium = make_aquarium()
        manager = aquarium.manager
        manager.remove_entity(manager.large_creature.id)
        assert not manager.has_large_creature()
        aquarium.top_up(30.0)
        assert manager.large_creature.entity_type == "shark"

    def test_top_up_leaves_existing_large_creature(self):
        aquarium = make_aquarium()
        current = aquarium.manager.large_creature
        aquarium.top_up(30.0)
        assert aquarium.manager.large_creature is current


class TestResize:
    def test_same_bounds_keep_tank(self):
        aquarium = make_aquarium()
        manager = aquarium.manager
        aquarium.resize(BOUNDS)
        assert aquarium.manager is manager

    def test_rebuild(self):
        aquarium = make_aquarium()
        aquarium.resize(Bounds(120, 40), now=0.0)
        manager = aquarium.manager
        assert len(manager.get_entities_by_type("fish")) == 10
        assert len(manager.get_entities_by_type("seaweed")) == 8
        castle = manager.get_entities_by_type("castle")[0]
        assert (castle.position.x, castle.position.y) == (88, 27)

    def test_in_place_layout_sync(self):
        aquarium = make_aquarium()
        manager = aquarium.manager
        aquarium.resize(Bounds(120, 40), rebuild=False)
        assert aquarium.manager is manager
        aquarium.sync_layout()
        castle = manager.get_entities_by_type("castle")[0]
        assert (castle.position.x, castle.position.y) == (88, 27)
        assert all(w.width == 120 for w in manager.get_entities_by_type("water_surface"))

    def test_redraw_resets_tank(self):
        aquarium = make_aquarium()
        old = aquarium.manager
        aquarium.redraw(now=3.0)
        assert aquarium.manager is not old
        assert aquarium.last_fish_spawn == 3.0
        assert len(aquarium.manager.get_entities_by_type("castle")) == 1


class TestRender:
    def test_status_line(self):
        aquarium = make_aquarium()
        count = aquarium.manager.entity_count()
        assert aquarium.status_line() == f"Fish: 3 | Total: {count} | {KEY_HELP}"
        aquarium.toggle_pause()
        assert aquarium.status_line().startswith("PAUSED | Fish: 3")

    def test_status_on_last_row(self):
        aquarium = make_aquarium()
        buf = Buffer(BOUNDS.width, BOUNDS.height)
        aquarium.render(buf)
        assert buf.row_text(BOUNDS.height - 1).startswith(aquarium.status_line())

    def test_status_truncated_to_width(self):
        aquarium = make_aquarium(bounds=Bounds(20, 24))
        buf = Buffer(20, 24)
        aquarium.render(buf)
        assert buf.row_text(23)[:19] == aquarium.status_line()[:19]

    def test_status_hidden(self):
        aquarium = make_aquarium(show_status=False)
        buf = Buffer(BOUNDS.width, BOUNDS.height)
        aquarium.render(buf)
        assert "Fish:" not in buf.row_text(BOUNDS.height - 1)

    def test_water_drawn_below_sky(self):
        aquarium = make_aquarium()
        buf = Buffer(BOUNDS.width, BOUNDS.height)
        aquarium.render(buf)
        assert buf.row_text(5).strip() != ""
