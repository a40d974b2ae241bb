"""Reversi rules engine with heuristic computer opponents."""

from .ai import Difficulty, choose_ai_move
from .core import (
    Board,
    Cell,
    FinalSummary,
    GameMode,
    GameState,
    GameStatus,
    IllegalMoveError,
    InvalidCoordinateError,
    InvalidStateTransitionError,
    Move,
    ReversiError,
    Score,
    Winner,
    apply_move,
    final_summary,
    is_terminal,
    legal_moves,
    start_game,
)
from .session import GameSession, PendingMove

__version__ = "0.1.0"

__all__ = [
    "Difficulty",
    "choose_ai_move",
    "Board",
    "Cell",
    "FinalSummary",
    "GameMode",
    "GameState",
    "GameStatus",
    "IllegalMoveError",
    "InvalidCoordinateError",
    "InvalidStateTransitionError",
    "Move",
    "ReversiError",
    "Score",
    "Winner",
    "apply_move",
    "final_summary",
    "is_terminal",
    "legal_moves",
    "start_game",
    "GameSession",
    "PendingMove",
]
