"""pyquarium CLI -- parse options, configure logging, run the curses aquarium."""

import argparse
import curses
import logging

from . import __version__
from .config import DEFAULT_FPS, DEFAULT_LOG_LEVEL, LOG_FORMAT, Settings
from .screen import Screen

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────
#  Logging
# ──────────────────────────────────────────────

def _configure_logging(settings: Settings):
    """Curses owns the terminal, so logs only ever go to a file."""
    if settings.log_file:
        logging.basicConfig(
            filename=settings.log_file,
            level=settings.log_level,
            format=LOG_FORMAT,
        )
    else:
        logging.basicConfig(handlers=[logging.NullHandler()], level=settings.log_level)


# ──────────────────────────────────────────────
#  TUI runner
# ──────────────────────────────────────────────

def _run_tui(stdscr, settings: Settings):
    Screen(stdscr, settings).run()


# ──────────────────────────────────────────────
#  Argument parser
# ──────────────────────────────────────────────

def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyquarium",
        description="pyquarium - an ASCII art aquarium for your terminal",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--classic", action="store_true",
                        help="Only show the classic fish and monster designs")
    parser.add_argument("--fps", type=_positive_int, default=DEFAULT_FPS,
                        help=f"Frames per second (default: {DEFAULT_FPS})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the random generator for a repeatable tank")
    parser.add_argument("--no-status", action="store_true",
                        help="Hide the status line at the bottom of the screen")
    parser.add_argument("--log-file", default=None,
                        help="Write log messages to this file")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        type=str.upper,
                        help=f"Log level (default: {DEFAULT_LOG_LEVEL})")
    return parser


# ──────────────────────────────────────────────
#  Entry point
# ──────────────────────────────────────────────

def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = Settings.from_args(args)
    _configure_logging(settings)
    logger.info("pyquarium %s starting (classic=%s, fps=%d, seed=%s)",
                __version__, settings.classic, settings.fps, settings.seed)
    try:
        curses.wrapper(lambda stdscr: _run_tui(stdscr, settings))
    except KeyboardInterrupt:
        pass
    logger.info("pyquarium stopped")
