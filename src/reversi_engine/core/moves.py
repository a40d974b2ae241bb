"""
Move generation: captures, legality and availability hints.

A placement captures, in each of the 8 directions independently, the run of
opponent cells that starts next to the target and ends on one of the mover's
own cells (the flanking anchor). Runs that reach the board edge or stop on a
vacant cell capture nothing.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .board import DIRECTIONS, Board, Cell, Position, check_position, opponent, ray
from .scoring import move_score


@dataclass(frozen=True)
class Move:
    """A legal placement with the cells it flips and its desirability."""

    position: Position
    captured: Tuple[Position, ...]
    score: float

    def __post_init__(self) -> None:
        if not self.captured:
            raise ValueError(f"Move at {self.position} captures nothing")


def captured_cells_for(board: Board, pos: Position, player: Cell) -> List[Position]:
    """
    Get the opponent cells captured by placing at pos.

    Args:
        board: Board to evaluate
        pos: Target position (its own content is not inspected)
        player: Player placing the piece

    Returns:
        Captured positions, grouped by direction and ordered outward from pos
    """
    check_position(board, pos)
    enemy = opponent(player)
    captured = []

    for direction in DIRECTIONS:
        run = []
        for cell_pos in ray(board, pos, direction):
            cell = board[cell_pos]
            if cell == enemy:
                run.append(cell_pos)
                continue
            if cell == player:
                captured.extend(run)
            break

    return captured


def is_legal(board: Board, pos: Position, player: Cell) -> bool:
    """A move is legal on a vacant cell that captures at least one cell."""
    check_position(board, pos)
    if not board[pos].is_vacant:
        return False
    return bool(captured_cells_for(board, pos, player))


def legal_moves(board: Board, player: Cell) -> List[Move]:
    """
    Generate all legal moves for a player.

    Positions are scanned in row-major order; the AI relies on this order
    to break ties.

    Args:
        board: Board to evaluate
        player: Player to move

    Returns:
        Moves with their captures and desirability score
    """
    moves = []

    for pos in board.positions():
        if not board[pos].is_vacant:
            continue
        captured = captured_cells_for(board, pos, player)
        if captured:
            moves.append(
                Move(
                    position=pos,
                    captured=tuple(captured),
                    score=move_score(board, pos, captured),
                )
            )

    return moves


def clear_available(board: Board) -> Board:
    """Return a copy with every availability hint reset to empty."""
    return board.with_cells(
        {pos: Cell.EMPTY for pos in board.positions() if board[pos] == Cell.AVAILABLE}
    )


def mark_available(board: Board, player: Cell) -> Board:
    """
    Return a copy with every legal destination for player flagged AVAILABLE.

    Legality is evaluated on a snapshot where stale hints are already
    cleared, and the new hints are written into a separate board, so the
    result does not depend on scan order.
    """
    snapshot = clear_available(board)
    return snapshot.with_cells(
        {move.position: Cell.AVAILABLE for move in legal_moves(snapshot, player)}
    )
