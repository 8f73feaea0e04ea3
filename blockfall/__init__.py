"""Falling-block puzzle game logic: board, piece bag, player piece and frame loop."""

__version__ = "0.1.0"
__all__ = ["constants", "math_tables", "board", "piece_bag", "player", "game"]