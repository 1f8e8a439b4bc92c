"""A turn-based tile game on a randomly generated grid, played in the terminal."""

__version__ = "0.1.0"