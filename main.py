#!/usr/bin/env python3
"""
pyquarium - an ASCII art aquarium for the terminal

Usage:
    python main.py              # Start the aquarium
    python main.py --classic    # Classic fish and monster designs only
    python main.py --seed 42    # Repeatable tank
"""

from pyquarium.cli import main


if __name__ == "__main__":
    main()
