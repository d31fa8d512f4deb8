# screen.py
"""Curses front end: sets up the terminal, feeds keys and frames to the aquarium."""

import curses
import logging
import random
import time

from .aquarium import Aquarium
from .base import Bounds
from .buffer import Buffer
from .config import Settings
from .sprite import Color

logger = logging.getLogger(__name__)

KEY_ESCAPE = 27

# Color -> curses color pair number
COLOR_PAIRS = {
    Color.RED: 1,
    Color.GREEN: 2,
    Color.YELLOW: 3,
    Color.BLUE: 4,
    Color.MAGENTA: 5,
    Color.CYAN: 6,
    Color.WHITE: 7,
}


class Screen:
    def __init__(self, stdscr, settings: Settings):
        self.stdscr = stdscr
        self.settings = settings
        self._setup_curses()
        rng = random.Random(settings.seed) if settings.seed is not None else None
        self.aquarium = Aquarium(
            self._bounds(),
            classic=settings.classic,
            rng=rng,
            show_status=settings.show_status,
        )

    def _setup_curses(self):
        curses.start_color()
        curses.use_default_colors()
        curses.curs_set(0)
        self.stdscr.nodelay(True)
        curses.init_pair(1, curses.COLOR_RED, -1)      # shark eye, castle flag
        curses.init_pair(2, curses.COLOR_GREEN, -1)    # seaweed
        curses.init_pair(3, curses.COLOR_YELLOW, -1)   # castle, ship hull
        curses.init_pair(4, curses.COLOR_BLUE, -1)     # whale
        curses.init_pair(5, curses.COLOR_MAGENTA, -1)
        curses.init_pair(6, curses.COLOR_CYAN, -1)     # water, bubbles
        curses.init_pair(7, curses.COLOR_WHITE, -1)    # eyes, status line

    def _bounds(self) -> Bounds:
        h, w = self.stdscr.getmaxyx()
        return Bounds(w, h)

    # ──────────────────────────────────────────
    #  Draw helpers
    # ──────────────────────────────────────────

    def _safe_addstr(self, y, x, text, attr=0):
        h, w = self.stdscr.getmaxyx()
        if y < 0 or y >= h or x >= w:
            return
        if x < 0:
            text = text[-x:]
            x = 0
        if x + len(text) > w:
            text = text[:w - x]
        if not text:
            return
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            pass

    def _attr(self, color: Color | None) -> int:
        if color is None:
            return 0
        return curses.color_pair(COLOR_PAIRS[color])

    def draw(self):
        bounds = self.aquarium.bounds
        buffer = Buffer(bounds.width, bounds.height)
        self.aquarium.render(buffer)

        self.stdscr.erase()
        for y in range(buffer.height):
            for x, text, color in buffer.runs(y):
                if text.strip():
                    self._safe_addstr(y, x, text, self._attr(color))
        self.stdscr.noutrefresh()
        curses.doupdate()

    # ──────────────────────────────────────────
    #  Main loop
    # ──────────────────────────────────────────

    def handle_key(self, key: int) -> bool:
        """React to one key press. Returns False when the user asked to quit."""
        if key in (ord('q'), ord('Q'), KEY_ESCAPE):
            return False
        if key in (ord('r'), ord('R')):
            logger.info("redraw requested")
            self.aquarium.redraw()
        elif key in (ord('p'), ord('P')):
            paused = self.aquarium.toggle_pause()
            logger.info("paused" if paused else "resumed")
        elif key == curses.KEY_RESIZE:
            self.aquarium.resize(self._bounds())
        return True

    def run(self):
        frame_time = self.settings.frame_time
        while True:
            started = time.monotonic()

            key = self.stdscr.getch()
            if key != -1 and not self.handle_key(key):
                break

            # Terminals that resize without sending KEY_RESIZE still get
            # their water and castle adjusted.
            self.aquarium.resize(self._bounds(), rebuild=False)
            self.aquarium.tick()
            self.draw()

            elapsed = time.monotonic() - started
            time.sleep(max(0.0, frame_time - elapsed))
