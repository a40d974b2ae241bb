"""Tests for board representation and geometry."""

import pytest
from reversi_engine.core import (
    DIRECTIONS,
    Board,
    Cell,
    InvalidCoordinateError,
    in_bounds,
    is_corner,
    is_edge,
    opponent,
)


def test_initial_board():
    """Test the canonical four-piece start."""
    board = Board.initial()

    assert board.height == 8
    assert board.width == 8
    assert board.count(Cell.PLAYER1) == 2
    assert board.count(Cell.PLAYER2) == 2
    assert board.count(Cell.EMPTY) == 60

    # Player 1 on the main diagonal, Player 2 on the other
    assert board[(3, 3)] == Cell.PLAYER1
    assert board[(4, 4)] == Cell.PLAYER1
    assert board[(3, 4)] == Cell.PLAYER2
    assert board[(4, 3)] == Cell.PLAYER2


def test_empty_board():
    """Test empty board creation."""
    board = Board.empty()

    assert board.count(Cell.EMPTY) == 64
    assert board.has_empty_cells()


def test_from_rows():
    """Test parsing a board from text rows."""
    board = Board.from_rows(["X O .", "* . X", ". . O"])

    assert board.height == 3
    assert board.width == 3
    assert board[(0, 0)] == Cell.PLAYER1
    assert board[(0, 1)] == Cell.PLAYER2
    assert board[(1, 0)] == Cell.AVAILABLE
    assert board[(2, 2)] == Cell.PLAYER2


def test_board_validation():
    """Test board validation catches malformed grids."""
    # Ragged rows
    with pytest.raises(ValueError):
        Board(((Cell.EMPTY, Cell.EMPTY), (Cell.EMPTY,)))

    # Not a cell value
    with pytest.raises(ValueError):
        Board(((Cell.EMPTY, "X"),))

    # Unknown symbol
    with pytest.raises(ValueError):
        Board.from_rows(["X?"])


def test_with_cells_returns_new_board():
    """Test that replacing cells leaves the original untouched."""
    board = Board.initial()
    changed = board.with_cells({(0, 0): Cell.PLAYER1})

    assert changed[(0, 0)] == Cell.PLAYER1
    assert board[(0, 0)] == Cell.EMPTY
    assert changed is not board
    assert changed != board


def test_positions_row_major():
    """Test that positions are scanned row by row."""
    positions = list(Board.empty(3).positions())

    assert positions == [
        (0, 0), (0, 1), (0, 2),
        (1, 0), (1, 1), (1, 2),
        (2, 0), (2, 1), (2, 2),
    ]


def test_in_bounds():
    """Test bounds checking."""
    board = Board.empty()

    assert in_bounds(board, (0, 0))
    assert in_bounds(board, (7, 7))
    assert not in_bounds(board, (-1, 0))
    assert not in_bounds(board, (0, 8))
    assert not in_bounds(board, (8, 3))


def test_edges_and_corners():
    """Test edge and corner detection."""
    board = Board.empty()

    for corner in [(0, 0), (0, 7), (7, 0), (7, 7)]:
        assert is_corner(board, corner)
        assert is_edge(board, corner)

    for edge in [(0, 3), (5, 0), (7, 4), (2, 7)]:
        assert is_edge(board, edge)
        assert not is_corner(board, edge)

    for inner in [(1, 1), (3, 4), (6, 6)]:
        assert not is_edge(board, inner)
        assert not is_corner(board, inner)


def test_geometry_rejects_out_of_bounds():
    """Test that out-of-bounds positions are signaled, not clamped."""
    board = Board.empty()

    with pytest.raises(InvalidCoordinateError):
        is_edge(board, (8, 0))
    with pytest.raises(InvalidCoordinateError):
        is_corner(board, (0, -1))
    with pytest.raises(InvalidCoordinateError):
        board[(9, 9)]


def test_directions():
    """Test the eight unit directions."""
    assert len(DIRECTIONS) == 8
    assert len(set(DIRECTIONS)) == 8
    assert (0, 0) not in DIRECTIONS
    assert all(abs(dr) <= 1 and abs(dc) <= 1 for dr, dc in DIRECTIONS)


def test_opponent():
    """Test opponent lookup."""
    assert opponent(Cell.PLAYER1) == Cell.PLAYER2
    assert opponent(Cell.PLAYER2) == Cell.PLAYER1

    with pytest.raises(ValueError):
        opponent(Cell.EMPTY)
