"""Computer move selection policies."""

from .policy import (
    MIN_MOVE_SCORE,
    Difficulty,
    candidate_moves,
    choose_ai_move,
    choose_move,
    evaluate_move,
)
from .match import GameRecord, TournamentResult, play_game, run_tournament

__all__ = [
    "MIN_MOVE_SCORE",
    "Difficulty",
    "candidate_moves",
    "choose_ai_move",
    "choose_move",
    "evaluate_move",
    "GameRecord",
    "TournamentResult",
    "play_game",
    "run_tournament",
]
