"""Core board representation and rules."""

from .board import (
    BOARD_SIZE,
    DIRECTIONS,
    Board,
    Cell,
    Position,
    in_bounds,
    is_corner,
    is_edge,
    opponent,
)
from .errors import (
    IllegalMoveError,
    InvalidCoordinateError,
    InvalidStateTransitionError,
    ReversiError,
)
from .game_state import (
    FinalSummary,
    GameMode,
    GameState,
    GameStatus,
    Winner,
    new_game_state,
)
from .moves import (
    Move,
    captured_cells_for,
    clear_available,
    is_legal,
    legal_moves,
    mark_available,
)
from .rules import (
    apply_move,
    check_terminal,
    final_summary,
    is_terminal,
    start_game,
)
from .scoring import Score, cell_weight, move_score, score_board

__all__ = [
    "BOARD_SIZE",
    "DIRECTIONS",
    "Board",
    "Cell",
    "Position",
    "in_bounds",
    "is_corner",
    "is_edge",
    "opponent",
    "IllegalMoveError",
    "InvalidCoordinateError",
    "InvalidStateTransitionError",
    "ReversiError",
    "FinalSummary",
    "GameMode",
    "GameState",
    "GameStatus",
    "Winner",
    "new_game_state",
    "Move",
    "captured_cells_for",
    "clear_available",
    "is_legal",
    "legal_moves",
    "mark_available",
    "apply_move",
    "check_terminal",
    "final_summary",
    "is_terminal",
    "start_game",
    "Score",
    "cell_weight",
    "move_score",
    "score_board",
]
