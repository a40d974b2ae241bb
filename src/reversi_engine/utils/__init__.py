"""Utility modules for the Reversi engine."""

from .rich_display import GameDisplay

__all__ = [
    "GameDisplay",
]
