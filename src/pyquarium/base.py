# base.py
"""Kinematic primitives and the base class every aquarium entity derives from."""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from .sprite import Sprite

# Velocities are cells per frame at this rate; scaled by delta time on every move.
FRAME_RATE = 60


class Direction(Enum):
    LEFT = -1
    RIGHT = 1

    @classmethod
    def random(cls, rng=random) -> "Direction":
        return cls.RIGHT if rng.random() < 0.5 else cls.LEFT


class DeathAction(Enum):
    """What the manager should spawn when an entity dies."""
    SPAWN_FISH = "spawn_fish"
    SPAWN_SEAWEED = "spawn_seaweed"
    RANDOM_OBJECT = "random_object"
    SHARK_DEATH = "shark_death"


@dataclass
class Position:
    x: float
    y: float
    depth: int = 0

    def screen(self) -> tuple[int, int]:
        """Cell coordinates, truncated toward zero."""
        return int(self.x), int(self.y)


@dataclass
class Velocity:
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def zero(cls) -> "Velocity":
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class Bounds:
    width: int
    height: int


class Entity(ABC):
    """Anything the manager can update, render and collide.

    Subclasses set ``entity_type`` (the tag used for manager queries) and,
    when their death should spawn something, ``death_action``. Entities with
    ``static = True`` ignore velocity changes.
    """

    entity_type = "entity"
    death_action: DeathAction | None = None
    static = False

    def __init__(self, position: Position, velocity: Velocity | None = None):
        self.id = 0
        self.position = position
        self._velocity = velocity if velocity is not None and not self.static else Velocity.zero()
        self.alive = True

    def __repr__(self):
        return (f"{type(self).__name__}(id={self.id}, x={self.position.x:.1f}, "
                f"y={self.position.y:.1f}, depth={self.depth})")

    @property
    def depth(self) -> int:
        return self.position.depth

    @property
    def velocity(self) -> Velocity:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Velocity):
        self.set_velocity(value)

    def set_velocity(self, velocity: Velocity):
        if self.static:
            return
        self._velocity = velocity

    @abstractmethod
    def current_sprite(self) -> Sprite:
        ...

    @abstractmethod
    def update(self, delta_time: float, bounds: Bounds):
        ...

    def move(self, delta_time: float):
        self.position.x += self._velocity.dx * delta_time * FRAME_RATE
        self.position.y += self._velocity.dy * delta_time * FRAME_RATE

    def is_alive(self) -> bool:
        return self.alive

    def kill(self):
        self.alive = False

    def death_callback(self) -> DeathAction | None:
        return self.death_action

    # ── Geometry ──

    def bounding_box(self) -> tuple[int, int, int, int]:
        """World-space ``(x, y, width, height)`` of the current sprite."""
        x, y = self.position.screen()
        w, h = self.current_sprite().bounding_box()
        return x, y, w, h

    def world_cells(self) -> set[tuple[int, int]]:
        x, y = self.position.screen()
        return {(x + col, y + row) for col, row, _ in self.current_sprite().opaque_cells()}

    def overlaps_box(self, other: "Entity") -> bool:
        ax, ay, aw, ah = self.bounding_box()
        bx, by, bw, bh = other.bounding_box()
        return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah

    def collides_with(self, other: "Entity") -> bool:
        """Exact overlap of opaque cells, not just bounding boxes."""
        if not self.overlaps_box(other):
            return False
        return not self.world_cells().isdisjoint(other.world_cells())

    def render(self, buffer, bounds: Bounds):
        sprite = self.current_sprite()
        x0, y0 = self.position.screen()
        for col, row, ch in sprite.opaque_cells():
            x, y = x0 + col, y0 + row
            if 0 <= x < bounds.width and 0 <= y < bounds.height:
                buffer.set_cell(x, y, ch, sprite.color_at(col, row))
