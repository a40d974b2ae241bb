"""
Reversi game rules implementation.

Implements the game flow:
- Canonical four-piece start, Player 1 moves first
- A placement flips every flanked opponent run
- Players strictly alternate
- Game ends when the board is full or either player has no legal move
"""

import logging
from dataclasses import replace

from .board import Board, Cell, Position, check_position, opponent
from .errors import IllegalMoveError, InvalidStateTransitionError
from .game_state import FinalSummary, GameMode, GameState, GameStatus, Winner
from .moves import captured_cells_for, clear_available, legal_moves
from .scoring import score_board

logger = logging.getLogger(__name__)


def start_game(mode: GameMode) -> GameState:
    """
    Create the initial in-progress game state.

    Args:
        mode: Who plays the second side

    Returns:
        Starting GameState with Player 1 to move
    """
    if mode == GameMode.NONE:
        raise ValueError("Cannot start a game without a game mode")

    board = Board.initial()
    logger.debug(f"Starting new game in mode {mode.value}")

    return GameState(
        board=board,
        current_player=Cell.PLAYER1,
        score=score_board(board),
        status=GameStatus.IN_PROGRESS,
        mode=mode,
    )


def board_is_terminal(board: Board) -> bool:
    """
    Check the end-of-game condition on a board.

    Both sides are checked regardless of whose turn it is: the game ends
    as soon as either player has no legal move.
    """
    if not board.has_empty_cells():
        return True
    return not legal_moves(board, Cell.PLAYER1) or not legal_moves(board, Cell.PLAYER2)


def is_terminal(state: GameState) -> bool:
    """
    Check if the game has ended.

    Args:
        state: Game state to check

    Returns:
        True if the game is over (a game that has not started never is)
    """
    if state.status == GameStatus.FINISHED:
        return True
    if state.status == GameStatus.NOT_STARTED:
        return False
    return board_is_terminal(state.board)


def check_terminal(state: GameState) -> GameState:
    """Return the finished copy of state if the game has ended, else state itself."""
    if state.status == GameStatus.IN_PROGRESS and board_is_terminal(state.board):
        logger.debug(
            f"Game finished with score {state.score.player1} : {state.score.player2}"
        )
        return replace(state, status=GameStatus.FINISHED)
    return state


def apply_move(state: GameState, pos: Position) -> GameState:
    """
    Apply a move and return the resulting state.

    1. Place the current player's piece at pos
    2. Flip every captured cell
    3. Recompute the score and pass the turn
    4. Finish the game if the terminal condition holds

    Args:
        state: Current game state (left untouched)
        pos: Target position

    Returns:
        New GameState after the move
    """
    if state.status != GameStatus.IN_PROGRESS:
        raise InvalidStateTransitionError(
            f"Cannot apply a move while the game is {state.status.value}"
        )
    check_position(state.board, pos)

    player = state.current_player
    board = clear_available(state.board)

    if not board[pos].is_vacant:
        raise IllegalMoveError(f"Cell {pos} is already occupied")
    captured = captured_cells_for(board, pos, player)
    if not captured:
        raise IllegalMoveError(f"Move {pos} captures nothing for {player.name}")

    changes = {cell: player for cell in captured}
    changes[pos] = player
    board = board.with_cells(changes)

    logger.debug(f"{player.name} plays {pos}, capturing {len(captured)} cells")

    next_state = GameState(
        board=board,
        current_player=opponent(player),
        score=score_board(board),
        status=GameStatus.IN_PROGRESS,
        mode=state.mode,
    )
    return check_terminal(next_state)


def final_summary(state: GameState) -> FinalSummary:
    """
    Summarize a finished game.

    Args:
        state: Terminal game state

    Returns:
        Both scores and the winner
    """
    if not is_terminal(state):
        raise InvalidStateTransitionError("Cannot summarize a game that has not ended")

    p1_score = state.score.player1
    p2_score = state.score.player2

    if p1_score > p2_score:
        winner = Winner.PLAYER1
    elif p2_score > p1_score:
        winner = Winner.PLAYER2
    else:
        winner = Winner.DRAW

    return FinalSummary(player1_score=p1_score, player2_score=p2_score, winner=winner)
