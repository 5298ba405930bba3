"""A two-player local pirate ship duel built on pygame."""

__version__ = "1.0.0"