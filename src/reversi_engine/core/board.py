"""
Board representation and geometry helpers.

The board is an immutable grid of cells stored as a tuple of row tuples,
so a board can be shared freely between states without aliasing:

         col 0 ........ col 7
    row 0  .  .  .  .  .  .  .  .
    row 3  .  .  .  X  O  .  .  .
    row 4  .  .  .  O  X  .  .  .
    row 7  .  .  .  .  .  .  .  .

Positions are (row, col) tuples. Every scan over the board runs in
row-major order (row ascending, then column ascending).
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Sequence, Tuple

from .errors import InvalidCoordinateError

BOARD_SIZE = 8

Position = Tuple[int, int]

# Unit vectors (d_row, d_col): horizontal, vertical, diagonal
DIRECTIONS: Tuple[Position, ...] = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
)


class Cell(str, Enum):
    """State of a single board cell."""

    EMPTY = "EM"
    AVAILABLE = "AV"  # transient "legal destination" hint, never occupancy
    PLAYER1 = "P1"
    PLAYER2 = "P2"

    @property
    def is_player(self) -> bool:
        return self in (Cell.PLAYER1, Cell.PLAYER2)

    @property
    def is_vacant(self) -> bool:
        """Empty or only hinted as available."""
        return self in (Cell.EMPTY, Cell.AVAILABLE)


_SYMBOLS = {
    Cell.EMPTY: ".",
    Cell.AVAILABLE: "*",
    Cell.PLAYER1: "X",
    Cell.PLAYER2: "O",
}
_FROM_SYMBOL = {symbol: cell for cell, symbol in _SYMBOLS.items()}


def opponent(player: Cell) -> Cell:
    """Get the other player."""
    if player == Cell.PLAYER1:
        return Cell.PLAYER2
    if player == Cell.PLAYER2:
        return Cell.PLAYER1
    raise ValueError(f"{player!r} is not a player")


@dataclass(frozen=True)
class Board:
    """
    Immutable rectangular grid of cells.

    Use the classmethods to build boards; with_cells() returns a
    structurally new board with some cells replaced.
    """

    cells: Tuple[Tuple[Cell, ...], ...]

    def __post_init__(self) -> None:
        """Validate grid shape."""
        if not self.cells or not self.cells[0]:
            raise ValueError("Board must have at least one row and one column")
        width = len(self.cells[0])
        for row in self.cells:
            if len(row) != width:
                raise ValueError("Board rows must all have the same length")
            for cell in row:
                if not isinstance(cell, Cell):
                    raise ValueError(f"Invalid cell value {cell!r}")

    @classmethod
    def empty(cls, size: int = BOARD_SIZE) -> "Board":
        """Board with every cell empty."""
        return cls(tuple(tuple(Cell.EMPTY for _ in range(size)) for _ in range(size)))

    @classmethod
    def initial(cls, size: int = BOARD_SIZE) -> "Board":
        """
        Canonical starting board: two pieces per player in the center,
        on alternating diagonals (Player 1 on the main diagonal).
        """
        mid = size // 2
        return cls.empty(size).with_cells(
            {
                (mid - 1, mid - 1): Cell.PLAYER1,
                (mid, mid): Cell.PLAYER1,
                (mid - 1, mid): Cell.PLAYER2,
                (mid, mid - 1): Cell.PLAYER2,
            }
        )

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Parse a board from text rows using the __str__ symbols.

        Whitespace inside a row is ignored, so "X O . ." and "XO.." are
        equivalent.
        """
        parsed = []
        for row in rows:
            symbols = "".join(row.split())
            try:
                parsed.append(tuple(_FROM_SYMBOL[s] for s in symbols))
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol {e.args[0]!r} in row {row!r}") from e
        return cls(tuple(parsed))

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    def __getitem__(self, pos: Position) -> Cell:
        check_position(self, pos)
        row, col = pos
        return self.cells[row][col]

    def positions(self) -> Iterator[Position]:
        """All positions in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield (row, col)

    def with_cells(self, changes: Dict[Position, Cell]) -> "Board":
        """Return a new board with the given cells replaced."""
        for pos in changes:
            check_position(self, pos)
        rows = [list(row) for row in self.cells]
        for (row, col), cell in changes.items():
            rows[row][col] = cell
        return Board(tuple(tuple(row) for row in rows))

    def count(self, cell: Cell) -> int:
        """Number of cells holding the given value."""
        return sum(row.count(cell) for row in self.cells)

    def has_empty_cells(self) -> bool:
        """True if any cell is unoccupied (available hints count as empty)."""
        return any(cell.is_vacant for row in self.cells for cell in row)

    def __str__(self) -> str:
        """Human-readable grid with row and column indices."""
        header = "   " + " ".join(str(col) for col in range(self.width))
        lines = [header]
        for idx, row in enumerate(self.cells):
            lines.append(f"{idx:>2} " + " ".join(_SYMBOLS[cell] for cell in row))
        return "\n".join(lines)


def in_bounds(board: Board, pos: Position) -> bool:
    """Check whether a position lies on the board."""
    row, col = pos
    return 0 <= row < board.height and 0 <= col < board.width


def check_position(board: Board, pos: Position) -> None:
    """Raise InvalidCoordinateError if the position is off the board."""
    if not in_bounds(board, pos):
        raise InvalidCoordinateError(
            f"Position {pos} is outside the {board.height}x{board.width} board"
        )


def is_edge(board: Board, pos: Position) -> bool:
    """Row or column at an extreme."""
    check_position(board, pos)
    row, col = pos
    return row in (0, board.height - 1) or col in (0, board.width - 1)


def is_corner(board: Board, pos: Position) -> bool:
    """Both row and column at an extreme."""
    check_position(board, pos)
    row, col = pos
    return row in (0, board.height - 1) and col in (0, board.width - 1)


def ray(board: Board, pos: Position, direction: Position) -> Iterable[Position]:
    """Positions walking outward from pos (exclusive) until the board edge."""
    d_row, d_col = direction
    row, col = pos[0] + d_row, pos[1] + d_col
    while 0 <= row < board.height and 0 <= col < board.width:
        yield (row, col)
        row += d_row
        col += d_col
