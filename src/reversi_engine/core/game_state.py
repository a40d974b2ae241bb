"""
Game state representation.

A GameState bundles everything the engine needs to continue a game:
- Board (immutable grid)
- Player to move
- Score, validated against the board so it can never drift
- Status and mode
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Optional

from .board import Board, Cell
from .scoring import Score, score_board


class GameStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class GameMode(str, Enum):
    NONE = "none"
    EASY_AI = "easy_ai"
    HARD_AI = "hard_ai"
    TWO_PLAYER = "two_player"

    @property
    def against_computer(self) -> bool:
        return self in (GameMode.EASY_AI, GameMode.HARD_AI)


class Winner(str, Enum):
    PLAYER1 = "player1"
    PLAYER2 = "player2"
    DRAW = "draw"


@dataclass(frozen=True)
class GameState:
    """
    Immutable game state.

    current_player is None only before the game has started. Transitions
    always build a new GameState; see rules.apply_move().
    """

    board: Board
    current_player: Optional[Cell]
    score: Score = field(default_factory=Score)
    status: GameStatus = GameStatus.NOT_STARTED
    mode: GameMode = GameMode.NONE

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if self.status == GameStatus.NOT_STARTED:
            if self.current_player is not None:
                raise ValueError("A game that has not started has no player to move")
        elif self.current_player not in (Cell.PLAYER1, Cell.PLAYER2):
            raise ValueError(f"Invalid player {self.current_player!r}")

        expected = score_board(self.board)
        if self.score != expected:
            raise ValueError(f"Score {self.score} doesn't match board score {expected}")

    def __str__(self) -> str:
        """Human-readable board plus status line."""
        if self.status == GameStatus.IN_PROGRESS:
            status = f"{self.current_player.name}'s turn"
        else:
            status = self.status.value.replace("_", " ").capitalize()
        return (
            f"\n{self.board}\n\n"
            f"Score {self.score.player1} : {self.score.player2}\n"
            f"{status}\n"
        )


def new_game_state(mode: GameMode = GameMode.NONE) -> GameState:
    """State before a game starts: empty board, nobody to move."""
    return GameState(board=Board.empty(), current_player=None, mode=mode)


@dataclass(frozen=True)
class FinalSummary:
    """Outcome of a finished game."""

    player1_score: int
    player2_score: int
    winner: Winner

    def best_score_candidate(self, mode: GameMode) -> int:
        """
        Score the presentation layer compares against its stored best.

        Against the computer only the human side (Player 1) counts; in a
        two-player game the higher of the two scores counts.
        """
        if mode == GameMode.TWO_PLAYER:
            return max(self.player1_score, self.player2_score)
        return self.player1_score
