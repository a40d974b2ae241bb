"""Tests for the game session driver."""

import pytest
from reversi_engine import GameSession
from reversi_engine.core import (
    Cell,
    GameMode,
    GameStatus,
    InvalidStateTransitionError,
    legal_moves,
)


def play_out(session):
    """Play until the end, the human always taking the first legal move."""
    while session.state.status == GameStatus.IN_PROGRESS:
        if session.computer_to_move():
            pending = session.request_computer_move()
            if pending is None:
                session.tick()
                break
            assert session.commit(pending)
        else:
            state = session.state
            moves = legal_moves(state.board, state.current_player)
            if not moves:
                session.tick()
                break
            session.play(moves[0].position)
    return session.state


def test_new_session():
    """Test a session before any game."""
    session = GameSession()

    assert session.generation == 0
    assert session.state.status == GameStatus.NOT_STARTED
    assert not session.computer_to_move()
    assert session.request_computer_move() is None


def test_start():
    """Test starting a game."""
    session = GameSession()
    state = session.start(GameMode.EASY_AI)

    assert session.generation == 1
    assert state is session.state
    assert state.status == GameStatus.IN_PROGRESS
    assert state.current_player == Cell.PLAYER1


def test_computer_plays_second():
    """Test that the computer moves after the human."""
    session = GameSession()
    session.start(GameMode.HARD_AI)

    assert not session.computer_to_move()
    session.play((2, 4))
    assert session.computer_to_move()

    # Human cannot move for the computer
    with pytest.raises(InvalidStateTransitionError):
        session.play((2, 3))

    pending = session.request_computer_move()
    assert pending is not None
    assert session.commit(pending)
    assert session.state.current_player == Cell.PLAYER1
    assert session.state.board[pending.move.position] == Cell.PLAYER2


def test_two_player_mode_has_no_computer():
    """Test that both sides are human in two-player mode."""
    session = GameSession()
    session.start(GameMode.TWO_PLAYER)
    session.play((2, 4))

    assert not session.computer_to_move()
    assert session.request_computer_move() is None
    session.play((2, 3))
    assert session.state.current_player == Cell.PLAYER1


def test_stale_computer_move_discarded():
    """Test that a move computed before a restart is not applied."""
    session = GameSession()
    session.start(GameMode.EASY_AI)
    session.play((2, 4))
    pending = session.request_computer_move()

    fresh = session.start(GameMode.EASY_AI)

    assert session.commit(pending) is False
    assert session.state is fresh
    assert session.state.current_player == Cell.PLAYER1


def test_hint_board():
    """Test hints are shown for the human and hidden for the computer."""
    session = GameSession()
    session.start(GameMode.EASY_AI)

    assert session.hint_board().count(Cell.AVAILABLE) == 4

    session.play((2, 4))
    assert session.hint_board().count(Cell.AVAILABLE) == 0
    # Hints never leak into the authoritative board
    assert session.state.board.count(Cell.AVAILABLE) == 0


def test_full_game_against_computer():
    """Test a complete game against each difficulty."""
    for mode in (GameMode.EASY_AI, GameMode.HARD_AI):
        session = GameSession()
        session.start(mode)
        final = play_out(session)

        assert final.status == GameStatus.FINISHED
        summary = session.summary()
        assert summary.player1_score == final.score.player1
        assert summary.player2_score == final.score.player2
        assert summary.best_score_candidate(mode) == final.score.player1


def test_tick_after_finish_is_stable():
    """Test that ticking a finished game changes nothing."""
    session = GameSession()
    session.start(GameMode.HARD_AI)
    final = play_out(session)

    assert session.tick() is final


def test_summary_requires_finished_game():
    """Test that a running game has no summary."""
    session = GameSession()
    session.start(GameMode.TWO_PLAYER)

    with pytest.raises(InvalidStateTransitionError):
        session.summary()
