"""Small programming exercises: a dungeon crawler, data structures, text tools and number puzzles."""

__version__ = "0.1.0"