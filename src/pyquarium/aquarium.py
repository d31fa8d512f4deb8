# aquarium.py
"""The tank itself: drives the entity manager tick by tick, independent of curses."""

import logging
import random
import time

from . import spawning
from .base import Bounds
from .buffer import Buffer
from .manager import EntityManager
from .sprite import Color

logger = logging.getLogger(__name__)

FISH_SPAWN_INTERVAL = 2.0
SEAWEED_SPAWN_INTERVAL = 5.0
LARGE_CREATURE_INTERVAL = 30.0

KEY_HELP = "q=quit r=redraw p=pause"


class Aquarium:
    def __init__(self, bounds: Bounds, classic: bool = False, rng=None,
                 show_status: bool = True, now: float | None = None):
        self.bounds = bounds
        self.classic = classic
        self.rng = rng if rng is not None else random.Random()
        self.show_status = show_status
        self.paused = False
        self.redraw(now)

    # ──────────────────────────────────────────
    #  Lifecycle
    # ──────────────────────────────────────────

    def redraw(self, now: float | None = None):
        """Throw everything away and fill the tank from scratch."""
        if now is None:
            now = time.monotonic()
        self.manager = EntityManager(self.classic, self.rng)
        spawning.initialize_aquarium(self.manager, self.bounds)
        self.last_update = now
        self.last_fish_spawn = now
        self.last_seaweed_spawn = now
        self.last_large_check = now

    def resize(self, bounds: Bounds, rebuild: bool = True, now: float | None = None):
        """Adopt new screen bounds.

        With ``rebuild`` the tank is refilled from scratch; without it the
        water and castle are adjusted in place on the next tick.
        """
        if bounds == self.bounds:
            return
        logger.info("screen resized %dx%d -> %dx%d",
                    self.bounds.width, self.bounds.height, bounds.width, bounds.height)
        self.bounds = bounds
        if rebuild:
            self.redraw(now)

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused

    # ──────────────────────────────────────────
    #  Per tick
    # ──────────────────────────────────────────

    def tick(self, now: float | None = None) -> float:
        """Advance the simulation to ``now``. Returns the elapsed seconds simulated."""
        if now is None:
            now = time.monotonic()
        delta = max(0.0, now - self.last_update)
        self.last_update = now
        if self.paused:
            return 0.0

        self.sync_layout()
        self.handle_shark_collisions()
        self.manager.update_all(delta, self.bounds)
        self.emit_bubbles(delta)
        self.top_up(now)
        return delta

    def sync_layout(self):
        """Stretch the water and move the castle when the screen changed under us."""
        for water in self.manager.get_entities_by_type("water_surface"):
            if water.should_reposition(self.bounds):
                water.reposition_for_screen(self.bounds)
        for castle in self.manager.get_entities_by_type("castle"):
            if castle.should_reposition(self.bounds):
                castle.reposition_for_screen(self.bounds)

    def emit_bubbles(self, delta: float) -> int:
        emitted = 0
        for fish in self.manager.get_entities_by_type("fish"):
            if fish.is_alive() and fish.bubble_ready(delta):
                spawning.add_bubble(self.manager, fish)
                emitted += 1
        return emitted

    def top_up(self, now: float):
        if now - self.last_fish_spawn >= FISH_SPAWN_INTERVAL:
            self.last_fish_spawn = now
            if len(self.manager.get_entities_by_type("fish")) < spawning.fish_target(self.bounds):
                spawning.add_fish(self.manager, self.bounds)

        if now - self.last_seaweed_spawn >= SEAWEED_SPAWN_INTERVAL:
            self.last_seaweed_spawn = now
            if len(self.manager.get_entities_by_type("seaweed")) < spawning.seaweed_target(self.bounds):
                spawning.add_seaweed(self.manager, self.bounds)

        if now - self.last_large_check >= LARGE_CREATURE_INTERVAL:
            self.last_large_check = now
            if not self.manager.has_large_creature():
                spawning.add_shark(self.manager, self.bounds)

    def handle_shark_collisions(self) -> int:
        """Let shark teeth eat the fish they touch.

        A single bite also takes out every shark on screen, not only the one
        that bit. All victims are killed here and reaped by the next
        ``update_all``, which runs their replacement callbacks.
        """
        bites = 0
        for a_id, b_id in self.manager.check_collisions():
            a, b = self.manager.get(a_id), self.manager.get(b_id)
            kinds = {a.entity_type, b.entity_type}
            if kinds != {"fish", "shark_teeth"}:
                continue
            a.kill()
            b.kill()
            bites += 1
        if bites:
            for shark in self.manager.get_entities_by_type("shark"):
                shark.kill()
            logger.debug("sharks fed on %d fish", bites)
        return bites

    # ──────────────────────────────────────────
    #  Drawing
    # ──────────────────────────────────────────

    def status_line(self) -> str:
        fish = len(self.manager.get_entities_by_type("fish"))
        status = f"Fish: {fish} | Total: {self.manager.entity_count()} | {KEY_HELP}"
        if self.paused:
            status = "PAUSED | " + status
        return status

    def render(self, buffer: Buffer):
        self.manager.render_all(buffer, self.bounds)
        if self.show_status and self.bounds.height > 0:
            text = self.status_line()[:max(0, self.bounds.width - 1)]
            buffer.write_text(0, self.bounds.height - 1, text, Color.WHITE)
