"""
Score calculation.

Ownership score: every owned cell is worth 1, edge cells (corners
included) are worth 2.

Move desirability (used by the AI only) adds a landing bonus on top of the
weights of the captured cells: 0.8 for a corner, 0.4 for any other edge.
"""

from dataclasses import dataclass
from typing import Iterable

from .board import Board, Cell, Position, is_corner, is_edge

EDGE_WEIGHT = 2
INNER_WEIGHT = 1
CORNER_BONUS = 0.8
EDGE_BONUS = 0.4


@dataclass(frozen=True)
class Score:
    """Per-player score, always derived from a board."""

    player1: int = 0
    player2: int = 0

    def __post_init__(self) -> None:
        if self.player1 < 0 or self.player2 < 0:
            raise ValueError("Negative score not allowed")

    def for_player(self, player: Cell) -> int:
        """Score of the given player."""
        if player == Cell.PLAYER1:
            return self.player1
        if player == Cell.PLAYER2:
            return self.player2
        raise ValueError(f"{player!r} is not a player")


def cell_weight(board: Board, pos: Position) -> int:
    """Ownership weight of a cell."""
    return EDGE_WEIGHT if is_edge(board, pos) else INNER_WEIGHT


def corner_bonus(board: Board, pos: Position) -> float:
    """Landing bonus for a move's target cell."""
    if is_corner(board, pos):
        return CORNER_BONUS
    if is_edge(board, pos):
        return EDGE_BONUS
    return 0


def score_board(board: Board) -> Score:
    """Compute both players' scores in a single pass over the board."""
    p1_score = 0
    p2_score = 0

    for pos in board.positions():
        cell = board[pos]
        if cell == Cell.PLAYER1:
            p1_score += cell_weight(board, pos)
        elif cell == Cell.PLAYER2:
            p2_score += cell_weight(board, pos)

    return Score(player1=p1_score, player2=p2_score)


def move_score(board: Board, pos: Position, captured: Iterable[Position]) -> float:
    """
    Desirability of placing at pos and capturing the given cells.

    Args:
        board: Board the move is played on
        pos: Target position
        captured: Cells the move would flip

    Returns:
        Sum of the captured cells' weights plus the landing bonus
    """
    return sum(cell_weight(board, c) for c in captured) + corner_bonus(board, pos)
