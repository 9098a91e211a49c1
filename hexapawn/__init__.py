"""Hexapawn against a minimax computer opponent: board, search and terminal game."""

__version__ = "0.1.0"
__all__ = ["board", "search", "cli"]