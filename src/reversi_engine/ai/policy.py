"""
Heuristic move selection for the computer player.

Both difficulties share one lookahead:
- Easy (depth 1): the move with the highest desirability score
- Hard (depth 2): own score minus the opponent's best immediate reply

Ties go to the earliest move in row-major generation order.
"""

import logging
from enum import Enum
from typing import List, Optional

from ..core import (
    Board,
    Cell,
    GameState,
    GameStatus,
    InvalidStateTransitionError,
    Move,
    clear_available,
    legal_moves,
    opponent,
)

logger = logging.getLogger(__name__)

# Candidates scoring below this are ignored
MIN_MOVE_SCORE = 1


class Difficulty(str, Enum):
    EASY = "easy"
    HARD = "hard"

    @property
    def depth(self) -> int:
        """Number of plies the policy looks ahead."""
        return 1 if self == Difficulty.EASY else 2


def candidate_moves(board: Board, player: Cell) -> List[Move]:
    """Legal moves worth considering, in generation order."""
    return [m for m in legal_moves(board, player) if m.score >= MIN_MOVE_SCORE]


def simulate(board: Board, move: Move, player: Cell) -> Board:
    """Board after player makes move (scratch copy, no state bookkeeping)."""
    changes = {cell: player for cell in move.captured}
    changes[move.position] = player
    return board.with_cells(changes)


def evaluate_move(board: Board, player: Cell, move: Move, depth: int) -> float:
    """
    Score a move with a fixed-depth lookahead.

    Args:
        board: Board before the move
        player: Player making the move
        move: Move to evaluate
        depth: Plies to look ahead (1 = the move's own score)

    Returns:
        Own score minus the opponent's best reply evaluated one ply shallower.
        An opponent with no reply contributes 0.
    """
    if depth <= 1:
        return move.score

    next_board = simulate(board, move, player)
    enemy = opponent(player)
    replies = legal_moves(next_board, enemy)

    best_reply = 0
    if replies:
        best_reply = max(evaluate_move(next_board, enemy, r, depth - 1) for r in replies)

    return move.score - best_reply


def choose_move(board: Board, player: Cell, difficulty: Difficulty) -> Optional[Move]:
    """
    Pick a move for player.

    Args:
        board: Current board
        player: Player to move
        difficulty: Lookahead depth to use

    Returns:
        Chosen move, or None if there is nothing to play
    """
    board = clear_available(board)
    candidates = candidate_moves(board, player)
    if not candidates:
        logger.debug(f"No candidate moves for {player.name}")
        return None

    best = candidates[0]
    best_value = evaluate_move(board, player, best, difficulty.depth)

    # Only a strictly better value replaces the running best
    for move in candidates[1:]:
        value = evaluate_move(board, player, move, difficulty.depth)
        if best_value < value:
            best, best_value = move, value

    logger.debug(
        f"{difficulty.value} AI ({player.name}) chose {best.position} "
        f"(value {best_value:.1f}) from {len(candidates)} candidates"
    )
    return best


def choose_ai_move(state: GameState, difficulty: Difficulty) -> Optional[Move]:
    """
    Pick a move for the side to move in a running game.

    Args:
        state: Current game state
        difficulty: Lookahead depth to use

    Returns:
        Chosen move, or None when the side to move is stuck
    """
    if state.status != GameStatus.IN_PROGRESS:
        raise InvalidStateTransitionError(
            f"Cannot choose a move while the game is {state.status.value}"
        )
    return choose_move(state.board, state.current_player, difficulty)
