"""
Rich-based console output for the CLI.

Renders boards, legal-move tables, game summaries and tournament results.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..ai import Difficulty, TournamentResult
from ..core import Board, Cell, FinalSummary, GameState, GameStatus, Move, Winner

console = Console()
logger = logging.getLogger(__name__)

CELL_STYLES = {
    Cell.EMPTY: ("·", "dim"),
    Cell.AVAILABLE: ("•", "bold green"),
    Cell.PLAYER1: ("●", "bold yellow"),
    Cell.PLAYER2: ("●", "bold red"),
}


class GameDisplay:
    """Console display for boards and results."""

    def __init__(self, output: Optional[Console] = None):
        """
        Initialize display.

        Args:
            output: Console to print to (defaults to the module console)
        """
        self.console = output or console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str):
        """Show a section header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")

    def board_table(self, board: Board) -> Table:
        """Create a table rendering of the board."""
        table = Table(show_header=True, box=None, padding=(0, 1))
        table.add_column("", style="cyan", justify="right")
        for col in range(board.width):
            table.add_column(str(col), justify="center", style="cyan")

        for row_idx, row in enumerate(board.cells):
            cells = []
            for cell in row:
                symbol, style = CELL_STYLES[cell]
                cells.append(Text(symbol, style=style))
            table.add_row(str(row_idx), *cells)

        return table

    def show_state(self, state: GameState, board: Optional[Board] = None):
        """
        Print a board with the score and status line.

        Args:
            state: State to describe
            board: Board to draw instead of state.board (e.g. with hints)
        """
        self.console.print(self.board_table(board or state.board))
        self.console.print(
            f"Score [bold yellow]{state.score.player1}[/bold yellow] : "
            f"[bold red]{state.score.player2}[/bold red]"
        )
        if state.status == GameStatus.IN_PROGRESS:
            self.console.print(f"{state.current_player.name} is making a move")
        else:
            self.console.print(state.status.value.replace("_", " ").capitalize())

    def show_moves(self, moves: List[Move]):
        """Print legal moves in generation order."""
        if not moves:
            self.log_info("No legal moves")
            return

        table = Table(title="Legal moves")
        table.add_column("Position", style="cyan")
        table.add_column("Captures", justify="right")
        table.add_column("Score", justify="right")
        for move in moves:
            row, col = move.position
            table.add_row(f"{row},{col}", str(len(move.captured)), f"{move.score:.1f}")
        self.console.print(table)

    def show_summary(self, summary: FinalSummary):
        """Print the final result of a game."""
        if summary.winner == Winner.DRAW:
            self.log_success("It's a draw!")
        elif summary.winner == Winner.PLAYER1:
            self.log_success("[bold yellow]Player 1[/bold yellow] wins!")
        else:
            self.log_success("[bold red]Player 2[/bold red] wins!")
        self.console.print(
            f"Final score is {summary.player1_score} : {summary.player2_score}"
        )

    def show_tournament(self, result: TournamentResult):
        """Print a win table for a tournament."""
        wins = result.wins
        total = len(result.games)

        table = Table(title=f"Tournament ({total} games)")
        table.add_column("Policy", style="cyan")
        table.add_column("Wins", justify="right")
        table.add_column("Win rate", justify="right")

        for difficulty in Difficulty:
            rate = wins[difficulty] / total * 100 if total else 0.0
            table.add_row(difficulty.value, str(wins[difficulty]), f"{rate:.1f}%")
        table.add_row("draw", str(result.draws), "")

        self.console.print(table)
