"""A grid bomb game for competing bots, with a timed tournament runner."""

__version__ = "0.1.0"