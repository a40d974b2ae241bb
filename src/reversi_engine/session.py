"""
Game session driver.

Owns the live GameState for a presentation layer. The computer always
plays Player 2 in the computer modes. Computer moves are two-phase so the
caller can wait between computing and applying them:

    pending = session.request_computer_move()
    ...  # pacing delay, redraw, etc.
    session.commit(pending)

commit() drops a pending move if a new game was started or the state
moved on in the meantime.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .ai import Difficulty, choose_ai_move
from .core import (
    Board,
    Cell,
    FinalSummary,
    GameMode,
    GameState,
    GameStatus,
    InvalidStateTransitionError,
    Move,
    Position,
    apply_move,
    check_terminal,
    clear_available,
    final_summary,
    mark_available,
    new_game_state,
    start_game,
)

logger = logging.getLogger(__name__)

COMPUTER_PLAYER = Cell.PLAYER2

_MODE_DIFFICULTY = {
    GameMode.EASY_AI: Difficulty.EASY,
    GameMode.HARD_AI: Difficulty.HARD,
}


@dataclass(frozen=True)
class PendingMove:
    """A computer move computed against a specific state snapshot."""

    generation: int
    state: GameState
    move: Move


class GameSession:
    """Holds the authoritative state of one game at a time."""

    def __init__(self) -> None:
        self._state = new_game_state()
        self._generation = 0

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def generation(self) -> int:
        """Incremented on every start(); identifies the current game."""
        return self._generation

    def start(self, mode: GameMode) -> GameState:
        """Discard the current game and start a new one."""
        self._generation += 1
        self._state = start_game(mode)
        logger.info(f"Game {self._generation} started ({mode.value})")
        return self._state

    def computer_to_move(self) -> bool:
        """True if the computer should play next."""
        return (
            self._state.status == GameStatus.IN_PROGRESS
            and self._state.mode.against_computer
            and self._state.current_player == COMPUTER_PLAYER
        )

    def play(self, pos: Position) -> GameState:
        """Apply a human move."""
        if self.computer_to_move():
            raise InvalidStateTransitionError("It is the computer's turn")
        self._state = apply_move(self._state, pos)
        return self._state

    def request_computer_move(self) -> Optional[PendingMove]:
        """
        Compute the computer's move against the current state.

        Returns:
            PendingMove to pass to commit(), or None if the computer is not
            to move or has nothing to play
        """
        if not self.computer_to_move():
            return None

        move = choose_ai_move(self._state, _MODE_DIFFICULTY[self._state.mode])
        if move is None:
            return None
        return PendingMove(generation=self._generation, state=self._state, move=move)

    def commit(self, pending: PendingMove) -> bool:
        """
        Apply a pending computer move if it is still current.

        Returns:
            True if applied, False if the move was stale and discarded
        """
        if pending.generation != self._generation or pending.state is not self._state:
            logger.debug(
                f"Discarding stale computer move {pending.move.position} "
                f"(game {pending.generation}, current game {self._generation})"
            )
            return False

        self._state = apply_move(self._state, pending.move.position)
        return True

    def tick(self) -> GameState:
        """Run the end-of-game check on the live state."""
        self._state = check_terminal(self._state)
        return self._state

    def hint_board(self) -> Board:
        """
        Board to display.

        Legal destinations are flagged while a human is to move; hints are
        cleared otherwise.
        """
        if self._state.status == GameStatus.IN_PROGRESS and not self.computer_to_move():
            return mark_available(self._state.board, self._state.current_player)
        return clear_available(self._state.board)

    def summary(self) -> FinalSummary:
        """Final scores and winner of the current game."""
        return final_summary(self._state)
