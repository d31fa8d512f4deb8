# spawning.py
"""Spawn policy: what to create, when, and what replaces the dead."""

import logging
from typing import TYPE_CHECKING

from .base import Bounds, DeathAction
from .entities import (
    BigFish, Bubble, Castle, Fish, SeaMonster, Seaweed, Shark, SharkTeeth,
    Ship, WaterSurface, Whale,
)

if TYPE_CHECKING:
    from .manager import EntityManager

logger = logging.getLogger(__name__)

WATER_LAYERS = 4


# ──────────────────────────────────────────────
#  Population targets
# ──────────────────────────────────────────────

def fish_target(bounds: Bounds) -> int:
    """Fish count for a screen: one per 350 cells of open water."""
    return max(0, (bounds.height - 9) * bounds.width // 350)


def seaweed_target(bounds: Bounds) -> int:
    return max(1, bounds.width // 15)


# ──────────────────────────────────────────────
#  Small population
# ──────────────────────────────────────────────

def add_fish(manager: "EntityManager", bounds: Bounds) -> int:
    fish = Fish(manager.next_id(), bounds, manager.classic, manager.rng)
    return manager.add_entity(fish)


def add_bubble(manager: "EntityManager", fish: Fish) -> int:
    return manager.add_entity(Bubble(fish.bubble_position(), manager.rng))


def add_seaweed(manager: "EntityManager", bounds: Bounds) -> int:
    return manager.add_entity(Seaweed(bounds, manager.rng))


def add_all_fish(manager: "EntityManager", bounds: Bounds):
    for _ in range(fish_target(bounds)):
        add_fish(manager, bounds)


def add_all_seaweed(manager: "EntityManager", bounds: Bounds):
    for _ in range(seaweed_target(bounds)):
        add_seaweed(manager, bounds)


# ──────────────────────────────────────────────
#  Scenery
# ──────────────────────────────────────────────

def add_environment(manager: "EntityManager", bounds: Bounds):
    for layer in range(WATER_LAYERS):
        manager.add_entity(WaterSurface(layer, bounds, manager.rng))


def add_castle(manager: "EntityManager", bounds: Bounds) -> int:
    return manager.add_entity(Castle(bounds))


# ──────────────────────────────────────────────
#  Large creatures (one at a time)
# ──────────────────────────────────────────────

def _add_large(manager: "EntityManager", entity) -> int:
    entity_id = manager.add_entity(entity)
    manager.set_large_creature(entity_id)
    logger.debug("large creature %s spawned (id=%d)", entity.entity_type, entity_id)
    return entity_id


def add_shark(manager: "EntityManager", bounds: Bounds):
    if manager.has_large_creature():
        return None
    shark = Shark(bounds, manager.rng)
    shark_id = _add_large(manager, shark)
    teeth = SharkTeeth(shark.teeth_position(), shark.velocity, shark_id)
    shark.teeth_id = manager.add_entity(teeth)
    return shark_id


def add_whale(manager: "EntityManager", bounds: Bounds):
    if manager.has_large_creature():
        return None
    return _add_large(manager, Whale(bounds, manager.rng))


def add_ship(manager: "EntityManager", bounds: Bounds):
    if manager.has_large_creature():
        return None
    return _add_large(manager, Ship(bounds, manager.rng))


def add_sea_monster(manager: "EntityManager", bounds: Bounds):
    if manager.has_large_creature():
        return None
    return _add_large(manager, SeaMonster(bounds, manager.classic, manager.rng))


def add_big_fish(manager: "EntityManager", bounds: Bounds):
    if manager.has_large_creature():
        return None
    return _add_large(manager, BigFish(bounds, manager.classic, manager.rng))


LARGE_CREATURES = [add_ship, add_whale, add_sea_monster, add_big_fish, add_shark]


def random_object(manager: "EntityManager", bounds: Bounds):
    """Spawn one randomly chosen large creature unless one is already out."""
    if manager.has_large_creature():
        return None
    spawn = manager.rng.choice(LARGE_CREATURES)
    return spawn(manager, bounds)


# ──────────────────────────────────────────────
#  Death handlers
# ──────────────────────────────────────────────

def shark_death(manager: "EntityManager", bounds: Bounds):
    """Clear every set of teeth before sending in the next large creature."""
    for teeth in manager.get_entities_by_type("shark_teeth"):
        manager.remove_entity(teeth.id)
    random_object(manager, bounds)


DEATH_HANDLERS = {
    DeathAction.SPAWN_FISH: add_fish,
    DeathAction.SPAWN_SEAWEED: add_seaweed,
    DeathAction.RANDOM_OBJECT: random_object,
    DeathAction.SHARK_DEATH: shark_death,
}


def initialize_aquarium(manager: "EntityManager", bounds: Bounds):
    """Populate an empty tank: water, castle, seaweed, fish, then one large creature."""
    add_environment(manager, bounds)
    add_castle(manager, bounds)
    add_all_seaweed(manager, bounds)
    add_all_fish(manager, bounds)
    random_object(manager, bounds)
    logger.info("aquarium initialised at %dx%d with %d entities",
                bounds.width, bounds.height, manager.entity_count())
