# manager.py
"""Owns every live entity: updates, depth ordering, collisions and cleanup."""

import logging
import random

from . import spawning
from .base import Bounds, Entity

logger = logging.getLogger(__name__)


class EntityManager:
    """Holds all entities keyed by id, plus a depth index for paint order.

    Entities refer to each other only by id; the manager is the single owner.
    At most one large creature (ship, whale, sea monster, big fish or shark)
    is tracked in the large-creature slot at any time.
    """

    def __init__(self, classic: bool = False, rng=None):
        self.classic = classic
        self.rng = rng if rng is not None else random.Random()
        self._entities: dict[int, Entity] = {}
        self._layers: dict[int, list[int]] = {}
        self._next_id = 1
        self._large_creature: int | None = None

    def __len__(self):
        return len(self._entities)

    def __contains__(self, entity_id: int) -> bool:
        return entity_id in self._entities

    # ── Storage ──

    def next_id(self) -> int:
        """The id the next ``add_entity`` call will assign."""
        return self._next_id

    def add_entity(self, entity: Entity) -> int:
        entity_id = self._next_id
        self._next_id += 1
        entity.id = entity_id
        self._entities[entity_id] = entity
        self._layers.setdefault(entity.depth, []).append(entity_id)
        logger.debug("added %r", entity)
        return entity_id

    def remove_entity(self, entity_id: int):
        entity = self._entities.pop(entity_id, None)
        if entity is None:
            return
        layer = self._layers.get(entity.depth)
        if layer is not None:
            if entity_id in layer:
                layer.remove(entity_id)
            if not layer:
                del self._layers[entity.depth]
        if self._large_creature == entity_id:
            self._large_creature = None
        logger.debug("removed %r", entity)

    def clear(self):
        self._entities.clear()
        self._layers.clear()
        self._large_creature = None

    def get(self, entity_id: int) -> Entity | None:
        return self._entities.get(entity_id)

    def entities(self) -> list[Entity]:
        return list(self._entities.values())

    def entity_count(self) -> int:
        return len(self._entities)

    def get_entities_by_type(self, entity_type: str) -> list[Entity]:
        return [e for e in self._entities.values() if e.entity_type == entity_type]

    # ── Large creature slot ──

    def has_large_creature(self) -> bool:
        if self._large_creature is None:
            return False
        entity = self._entities.get(self._large_creature)
        return entity is not None and entity.is_alive()

    def set_large_creature(self, entity_id: int | None):
        self._large_creature = entity_id

    @property
    def large_creature(self) -> Entity | None:
        if self._large_creature is None:
            return None
        return self._entities.get(self._large_creature)

    # ── Per tick ──

    def update_all(self, delta_time: float, bounds: Bounds):
        """Update everything, then run death callbacks and purge the dead.

        Entities spawned by a death callback join the next tick's update.
        """
        for entity in list(self._entities.values()):
            entity.update(delta_time, bounds)

        dead = [e for e in self._entities.values() if not e.is_alive()]
        for entity in dead:
            if entity.id not in self._entities:
                continue
            if self._large_creature == entity.id:
                self._large_creature = None
            action = entity.death_callback()
            if action is not None:
                logger.debug("%r died, running %s", entity, action.value)
                spawning.DEATH_HANDLERS[action](self, bounds)
            self.remove_entity(entity.id)

    def check_collisions(self) -> list[tuple[int, int]]:
        """All pairs of live entities whose opaque cells overlap."""
        alive = [e for e in self._entities.values() if e.is_alive()]
        boxes = {e.id: e.bounding_box() for e in alive}
        cells: dict[int, set[tuple[int, int]]] = {}
        pairs = []
        for i, a in enumerate(alive):
            ax, ay, aw, ah = boxes[a.id]
            for b in alive[i + 1:]:
                bx, by, bw, bh = boxes[b.id]
                if not (ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah):
                    continue
                if a.id not in cells:
                    cells[a.id] = a.world_cells()
                if b.id not in cells:
                    cells[b.id] = b.world_cells()
                if not cells[a.id].isdisjoint(cells[b.id]):
                    pairs.append((a.id, b.id))
        return pairs

    def render_all(self, buffer, bounds: Bounds):
        """Paint back to front: deepest layer first."""
        for layer_depth in sorted(self._layers, reverse=True):
            for entity_id in self._layers[layer_depth]:
                self._entities[entity_id].render(buffer, bounds)
