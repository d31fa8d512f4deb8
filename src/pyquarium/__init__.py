"""pyquarium -- an ASCII art aquarium for the terminal."""

__version__ = "0.1.0"
