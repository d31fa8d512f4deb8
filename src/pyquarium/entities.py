# entities.py
"""Aquarium creatures and scenery."""

import random
import time
from enum import Enum

from . import depth
from .art import (
    FISH_ART, BUBBLE_FRAMES, SEAWEED_LEFT, SEAWEED_RIGHT, WATER_SEGMENTS,
    CASTLE_ART, CASTLE_MASK, SHARK_RIGHT, SHARK_RIGHT_MASK, SHARK_LEFT,
    SHARK_LEFT_MASK, SHARK_TEETH, SHIP_RIGHT, SHIP_RIGHT_MASK, SHIP_LEFT,
    SHIP_LEFT_MASK, WHALE_RIGHT, WHALE_RIGHT_MASK, WHALE_LEFT, WHALE_LEFT_MASK,
    WATER_SPOUT, MONSTER_NEW_RIGHT, MONSTER_NEW_RIGHT_MASK, MONSTER_NEW_LEFT,
    MONSTER_NEW_LEFT_MASK, MONSTER_OLD_RIGHT, MONSTER_OLD_RIGHT_MASK,
    MONSTER_OLD_LEFT, MONSTER_OLD_LEFT_MASK, BIG_FISH_1_RIGHT,
    BIG_FISH_1_RIGHT_MASK, BIG_FISH_1_LEFT, BIG_FISH_1_LEFT_MASK,
    BIG_FISH_2_RIGHT, BIG_FISH_2_RIGHT_MASK, BIG_FISH_2_LEFT,
    BIG_FISH_2_LEFT_MASK,
)
from .base import FRAME_RATE, Bounds, DeathAction, Direction, Entity, Position, Velocity
from .sprite import Animation, Sprite, rand_color_mask, random_color_map

# Topmost row fish may swim in; everything above is surface and sky.
WATER_TOP = 9


# ──────────────────────────────────────────────
#  Fish
# ──────────────────────────────────────────────

class FishSpecies(Enum):
    NEW_SMALL_1 = "new_small_1"
    NEW_SMALL_2 = "new_small_2"
    NEW_MEDIUM_1 = "new_medium_1"
    NEW_MEDIUM_2 = "new_medium_2"
    OLD_FANCY = "old_fancy"
    OLD_SIMPLE = "old_simple"
    OLD_WAVY = "old_wavy"
    OLD_TINY = "old_tiny"
    OLD_COMMA_LARGE = "old_comma_large"
    OLD_ANGLED_FIN = "old_angled_fin"
    OLD_COMMA_SMALL = "old_comma_small"
    OLD_ROUNDED = "old_rounded"

    @property
    def is_new(self) -> bool:
        return self.value.startswith("new_")

    @classmethod
    def random(cls, classic: bool = False, rng=random) -> "FishSpecies":
        """One in four fish is a new species, unless classic mode is on."""
        if not classic and rng.randrange(12) > 8:
            return rng.choice([s for s in cls if s.is_new])
        return rng.choice([s for s in cls if not s.is_new])


class Fish(Entity):
    entity_type = "fish"
    death_action = DeathAction.SPAWN_FISH

    MIN_SPEED = 0.5
    MAX_SPEED = 2.0

    def __init__(self, entity_id: int, bounds: Bounds, classic: bool = False, rng=random):
        self.species = FishSpecies.random(classic, rng)
        right, right_mask, left, left_mask = FISH_ART[self.species.value]
        colors = random_color_map(rng)
        self.sprites = {
            Direction.RIGHT: Sprite(right, rand_color_mask(right_mask, color_map=colors)),
            Direction.LEFT: Sprite(left, rand_color_mask(left_mask, color_map=colors)),
        }
        self.direction = Direction.RIGHT if entity_id % 2 == 0 else Direction.LEFT
        self._rng = rng

        speed = rng.uniform(self.MIN_SPEED, self.MAX_SPEED)
        w, h = self.sprites[self.direction].bounding_box()
        if self.direction is Direction.RIGHT:
            x, dx = 1 - w, speed
        else:
            x, dx = bounds.width - 2, -speed
        y = rng.randrange(WATER_TOP, max(bounds.height - h, WATER_TOP + 1))
        super().__init__(Position(x, y, depth.random_fish_depth(rng)), Velocity(dx, 0.0))
        self.bubble_timer = rng.uniform(2.0, 8.0)

    def current_sprite(self) -> Sprite:
        return self.sprites[self.direction]

    def set_velocity(self, velocity: Velocity):
        super().set_velocity(velocity)
        if velocity.dx > 0:
            self.direction = Direction.RIGHT
        elif velocity.dx < 0:
            self.direction = Direction.LEFT

    def update(self, delta_time: float, bounds: Bounds):
        self.move(delta_time)
        x, y = self.position.x, self.position.y
        w, h = self.current_sprite().bounding_box()
        if x + w < 0 or x > bounds.width or y + h < 0 or y > bounds.height:
            self.kill()

    def bubble_ready(self, delta_time: float) -> bool:
        """Count down the bubble timer; True when a bubble should be released."""
        self.bubble_timer -= delta_time
        if self.bubble_timer > 0:
            return False
        self.bubble_timer = self._rng.uniform(3.0, 10.0)
        return True

    def bubble_position(self) -> Position:
        """Just in front of the mouth, one layer closer to the viewer."""
        w, h = self.current_sprite().bounding_box()
        x = self.position.x + w if self.direction is Direction.RIGHT else self.position.x
        return Position(x, self.position.y + h // 2, self.depth - 1)


class Bubble(Entity):
    entity_type = "bubble"

    FRAME_DURATION = 0.2
    RISE_SPEED = -1.0
    ACCELERATION = 0.01
    MAX_RISE_SPEED = -2.0
    MAX_AGE = 30.0
    SURFACE_Y = 9.0
    DRIFT_MARGIN = 5

    def __init__(self, position: Position, rng=random):
        super().__init__(position, Velocity(rng.uniform(-0.1, 0.1), self.RISE_SPEED))
        self.animation = Animation(
            [Sprite([ch], ["C"]) for ch in BUBBLE_FRAMES],
            self.FRAME_DURATION,
            looping=False,
        )
        self.created_at = time.monotonic()

    def current_sprite(self) -> Sprite:
        return self.animation.current_sprite()

    def update(self, delta_time: float, bounds: Bounds):
        self.animation.advance()
        dy = self._velocity.dy - self.ACCELERATION * delta_time * FRAME_RATE
        self._velocity.dy = max(dy, self.MAX_RISE_SPEED)
        self.move(delta_time)

        x = int(self.position.x)
        if (self.position.y <= self.SURFACE_Y
                or time.monotonic() - self.created_at > self.MAX_AGE
                or x > bounds.width + self.DRIFT_MARGIN
                or x < -self.DRIFT_MARGIN):
            self.kill()


# ──────────────────────────────────────────────
#  Scenery
# ──────────────────────────────────────────────

def _seaweed_frames(height: int) -> list[Sprite]:
    sway_left, sway_right = [], []
    for row in range(height):
        if row % 2:
            sway_left.append(SEAWEED_LEFT)
            sway_right.append(SEAWEED_RIGHT)
        else:
            sway_left.append(SEAWEED_RIGHT)
            sway_right.append(SEAWEED_LEFT)

    def green(lines):
        return [line.replace("(", "G").replace(")", "G") for line in lines]

    return [Sprite(sway_left, green(sway_left)), Sprite(sway_right, green(sway_right))]


class Seaweed(Entity):
    entity_type = "seaweed"
    death_action = DeathAction.SPAWN_SEAWEED
    static = True

    MIN_LIFETIME = 8 * 60
    MAX_LIFETIME = 12 * 60

    def __init__(self, bounds: Bounds, rng=random):
        self.height = rng.randint(3, 6)
        x = rng.randrange(1, max(bounds.width - 1, 2))
        super().__init__(Position(x, bounds.height - self.height, depth.SEAWEED))
        self.animation = Animation(_seaweed_frames(self.height), 1.0 / rng.uniform(0.25, 0.30))
        self.die_time = time.monotonic() + rng.randrange(self.MIN_LIFETIME, self.MAX_LIFETIME)

    def current_sprite(self) -> Sprite:
        return self.animation.current_sprite()

    def update(self, delta_time: float, bounds: Bounds):
        self.animation.advance()
        if time.monotonic() >= self.die_time:
            self.kill()


class Castle(Entity):
    entity_type = "castle"
    static = True

    WIDTH = 32
    HEIGHT = 13

    def __init__(self, bounds: Bounds):
        x, y = self._anchor(bounds)
        super().__init__(Position(x, y, depth.CASTLE))
        self.sprite = Sprite(CASTLE_ART, CASTLE_MASK)

    @classmethod
    def _anchor(cls, bounds: Bounds) -> tuple[int, int]:
        return max(0, bounds.width - cls.WIDTH), max(0, bounds.height - cls.HEIGHT)

    def current_sprite(self) -> Sprite:
        return self.sprite

    def update(self, delta_time: float, bounds: Bounds):
        pass

    def should_reposition(self, bounds: Bounds) -> bool:
        x, y = self._anchor(bounds)
        return abs(self.position.x - x) > 0.1 or abs(self.position.y - y) > 0.1

    def reposition_for_screen(self, bounds: Bounds):
        self.position.x, self.position.y = self._anchor(bounds)


def _water_frames(segment: str, width: int) -> list[Sprite]:
    """Eight frames of ``segment`` tiled across ``width``, each shifted two cells."""
    width = max(width, 1)
    tiled = segment * (width // len(segment) + 3)
    frames = []
    for i in range(WaterSurface.FRAMES):
        start = (i * 2) % len(segment)
        line = tiled[start:start + width]
        frames.append(Sprite([line], ["C" * len(line)]))
    return frames


class WaterSurface(Entity):
    entity_type = "water_surface"
    static = True

    FRAMES = 8
    TOP = 5

    def __init__(self, layer: int, bounds: Bounds, rng=random):
        self.layer = layer
        self.width = bounds.width
        self.segment = WATER_SEGMENTS[layer % len(WATER_SEGMENTS)]
        super().__init__(Position(0, self.TOP + layer, depth.water_line_depth(layer)))
        self.animation = Animation(_water_frames(self.segment, self.width), rng.uniform(0.7, 0.9))

    def current_sprite(self) -> Sprite:
        return self.animation.current_sprite()

    def update(self, delta_time: float, bounds: Bounds):
        self.animation.advance()

    def should_reposition(self, bounds: Bounds) -> bool:
        return bounds.width != self.width

    def resize(self, width: int):
        self.width = width
        self.animation.replace_frames(_water_frames(self.segment, width))

    def reposition_for_screen(self, bounds: Bounds):
        self.resize(bounds.width)


# ──────────────────────────────────────────────
#  Large creatures
# ──────────────────────────────────────────────

class LargeCreature(Entity):
    """Crosses the screen once in a fixed direction, then makes way for the next one.

    ``exit_right``/``exit_left`` are how far past the edge it travels
    before it counts as gone.
    """

    death_action = DeathAction.RANDOM_OBJECT
    exit_right = 0
    exit_left = 0

    def __init__(self, position: Position, direction: Direction, speed: float):
        self.direction = direction
        super().__init__(position, Velocity(speed * direction.value, 0.0))

    def animate(self):
        pass

    def update(self, delta_time: float, bounds: Bounds):
        self.animate()
        self.move(delta_time)
        if self.is_offscreen(bounds):
            self.kill()

    def is_offscreen(self, bounds: Bounds) -> bool:
        if self.direction is Direction.RIGHT:
            return self.position.x > bounds.width + self.exit_right
        return self.position.x < -self.exit_left


def _spawn_x(direction: Direction, bounds: Bounds, right_start: float) -> float:
    """Large creatures enter from fully off screen."""
    if direction is Direction.RIGHT:
        return right_start
    return bounds.width + 2


class Shark(LargeCreature):
    entity_type = "shark"
    death_action = DeathAction.SHARK_DEATH
    exit_right = 10
    exit_left = 60

    SPEED = 2.0
    START_X = -53

    def __init__(self, bounds: Bounds, rng=random):
        direction = Direction.random(rng)
        x = _spawn_x(direction, bounds, self.START_X)
        y = rng.randrange(WATER_TOP, max(bounds.height - 10, WATER_TOP + 1))
        super().__init__(Position(x, y, depth.SHARK), direction, self.SPEED)
        if direction is Direction.RIGHT:
            self.sprite = Sprite(SHARK_RIGHT, SHARK_RIGHT_MASK)
        else:
            self.sprite = Sprite(SHARK_LEFT, SHARK_LEFT_MASK)
        self.teeth_id: int | None = None

    def current_sprite(self) -> Sprite:
        return self.sprite

    def teeth_position(self) -> Position:
        """Where the bite point sits relative to the jaw."""
        offset = 44 if self.direction is Direction.RIGHT else 9
        return Position(self.position.x + offset, self.position.y + 7, self.depth + 1)


class SharkTeeth(Entity):
    """Bite point that travels with its shark and eats the fish it touches."""

    entity_type = "shark_teeth"
    margin = 10

    def __init__(self, position: Position, velocity: Velocity, shark_id: int):
        super().__init__(position, Velocity(velocity.dx, velocity.dy))
        self.shark_id = shark_id
        self.sprite = Sprite([SHARK_TEETH], ["R"])

    def current_sprite(self) -> Sprite:
        return self.sprite

    def update(self, delta_time: float, bounds: Bounds):
        self.move(delta_time)
        x = self.position.x
        if self._velocity.dx >= 0 and x > bounds.width + self.margin:
            self.kill()
        elif self._velocity.dx <= 0 and x < -self.margin:
            self.kill()


def _whale_frames(direction: Direction) -> list[Sprite]:
    if direction is Direction.RIGHT:
        body, body_mask, align = WHALE_RIGHT, WHALE_RIGHT_MASK, 11
    else:
        body, body_mask, align = WHALE_LEFT, WHALE_LEFT_MASK, 1

    blank = ["", "", ""]
    frames = [Sprite(blank + body, blank + body_mask) for _ in range(5)]
    for spout in WATER_SPOUT:
        rows = [" " * align + line if line else "" for line in spout]
        mask = ["".join(" " if ch == " " else "C" for ch in row) for row in rows]
        frames.append(Sprite(rows + body, mask + body_mask))
    return frames


class Whale(LargeCreature):
    entity_type = "whale"
    exit_right = 20
    exit_left = 20

    SPEED = 1.0
    START_X = -18
    FRAME_DURATION = 0.5

    def __init__(self, bounds: Bounds, rng=random):
        direction = Direction.random(rng)
        x = _spawn_x(direction, bounds, self.START_X)
        super().__init__(Position(x, 0, depth.WHALE), direction, self.SPEED)
        self.animation = Animation(_whale_frames(direction), self.FRAME_DURATION)

    def animate(self):
        self.animation.advance()

    def current_sprite(self) -> Sprite:
        return self.animation.current_sprite()


class Ship(LargeCreature):
    entity_type = "ship"
    exit_right = 30
    exit_left = 30

    SPEED = 1.0
    START_X = -24

    def __init__(self, bounds: Bounds, rng=random):
        direction = Direction.random(rng)
        x = _spawn_x(direction, bounds, self.START_X)
        super().__init__(Position(x, 0, depth.SHIP), direction, self.SPEED)
        if direction is Direction.RIGHT:
            self.sprite = Sprite(SHIP_RIGHT, SHIP_RIGHT_MASK)
        else:
            self.sprite = Sprite(SHIP_LEFT, SHIP_LEFT_MASK)

    def current_sprite(self) -> Sprite:
        return self.sprite


class SeaMonster(LargeCreature):
    entity_type = "sea_monster"
    exit_right = 60
    exit_left = 60

    SPEED = 2.0
    FRAME_DURATION = 0.25

    def __init__(self, bounds: Bounds, classic: bool = False, rng=random):
        direction = Direction.random(rng)
        self.classic = classic
        x = _spawn_x(direction, bounds, -64 if classic else -54)
        super().__init__(Position(x, 2, depth.SEA_MONSTER), direction, self.SPEED)

        if classic:
            arts = {Direction.RIGHT: (MONSTER_OLD_RIGHT, MONSTER_OLD_RIGHT_MASK),
                    Direction.LEFT: (MONSTER_OLD_LEFT, MONSTER_OLD_LEFT_MASK)}
        else:
            arts = {Direction.RIGHT: (MONSTER_NEW_RIGHT, MONSTER_NEW_RIGHT_MASK),
                    Direction.LEFT: (MONSTER_NEW_LEFT, MONSTER_NEW_LEFT_MASK)}
        frames, mask = arts[direction]
        self.animation = Animation([Sprite(frame, mask) for frame in frames], self.FRAME_DURATION)

    def animate(self):
        self.animation.advance()

    def current_sprite(self) -> Sprite:
        return self.animation.current_sprite()


class BigFish(LargeCreature):
    entity_type = "big_fish"
    exit_right = 200
    exit_left = 200

    # variant -> (speed, start x, rows kept clear below)
    VARIANTS = {
        1: (3.0, -34, 15),
        2: (2.5, -33, 14),
    }

    def __init__(self, bounds: Bounds, classic: bool = False, rng=random):
        if classic or rng.randrange(3) <= 1:
            self.variant = 1
        else:
            self.variant = 2
        speed, start_x, clearance = self.VARIANTS[self.variant]
        direction = Direction.random(rng)
        x = _spawn_x(direction, bounds, start_x)
        y = rng.randrange(WATER_TOP, max(bounds.height - clearance, WATER_TOP + 1))
        super().__init__(Position(x, y, depth.BIG_FISH), direction, speed)

        if self.variant == 1:
            art = {Direction.RIGHT: (BIG_FISH_1_RIGHT, BIG_FISH_1_RIGHT_MASK),
                   Direction.LEFT: (BIG_FISH_1_LEFT, BIG_FISH_1_LEFT_MASK)}
        else:
            art = {Direction.RIGHT: (BIG_FISH_2_RIGHT, BIG_FISH_2_RIGHT_MASK),
                   Direction.LEFT: (BIG_FISH_2_LEFT, BIG_FISH_2_LEFT_MASK)}
        lines, mask = art[direction]
        self.sprite = Sprite(lines, rand_color_mask(mask, rng))

    def current_sprite(self) -> Sprite:
        return self.sprite
