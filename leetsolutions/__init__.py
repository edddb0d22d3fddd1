"""Solutions to classic algorithm puzzles and the small data structures they use."""

__version__ = "0.1.0"