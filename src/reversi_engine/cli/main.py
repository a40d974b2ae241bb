"""
Main CLI for the Reversi engine.
"""

import argparse
import logging
import sys
from typing import List

from ..ai import Difficulty, play_game, run_tournament
from ..core import (
    GameMode,
    Position,
    ReversiError,
    apply_move,
    final_summary,
    is_terminal,
    legal_moves,
    mark_available,
    start_game,
)
from ..utils.rich_display import GameDisplay


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_position(text: str) -> Position:
    """Parse a "row,col" argument."""
    try:
        row, col = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected row,col but got {text!r}") from None
    return (row, col)


def simulate_command(args):
    """Play one computer-vs-computer game."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)
    display = GameDisplay()

    player1 = Difficulty(args.player1)
    player2 = Difficulty(args.player2)
    display.show_header(f"Reversi - {player1.value} vs {player2.value}")

    record = play_game(player1, player2)
    logger.info(f"Game finished after {len(record.moves)} moves")

    if args.show_moves:
        for idx, (row, col) in enumerate(record.moves, start=1):
            display.log(f"{idx:>2}. {row},{col}")

    display.show_state(record.final_state)
    display.show_summary(final_summary(record.final_state))


def replay_command(args):
    """Replay moves from the starting position and show the result."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)
    display = GameDisplay()

    state = start_game(GameMode.TWO_PLAYER)
    moves: List[Position] = args.moves

    for idx, pos in enumerate(moves, start=1):
        try:
            state = apply_move(state, pos)
        except ReversiError as e:
            display.log_error(f"Move {idx} ({pos[0]},{pos[1]}) rejected: {e}")
            sys.exit(1)
        logger.debug(f"Applied move {idx}: {pos}")

    display.show_header(f"Reversi - after {len(moves)} moves")

    if is_terminal(state):
        display.show_state(state)
        display.show_summary(final_summary(state))
        return

    display.show_state(state, board=mark_available(state.board, state.current_player))
    display.show_moves(legal_moves(state.board, state.current_player))


def tournament_command(args):
    """Play Easy against Hard over a series of games."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)
    display = GameDisplay()

    display.show_header(f"Reversi tournament - {args.games} games")
    result = run_tournament(
        num_games=args.games,
        opening_plies=args.opening_plies,
        seed=args.seed,
        show_progress=not args.no_progress,
    )
    logger.info(f"Tournament complete: {len(result.games)} games")
    display.show_tournament(result)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Reversi rules engine")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    difficulties = [d.value for d in Difficulty]

    # Simulate command
    simulate_parser = subparsers.add_parser(
        "simulate", help="Play one computer-vs-computer game"
    )
    simulate_parser.add_argument(
        "--player1", choices=difficulties, default="easy", help="Policy for Player 1"
    )
    simulate_parser.add_argument(
        "--player2", choices=difficulties, default="hard", help="Policy for Player 2"
    )
    simulate_parser.add_argument(
        "--show-moves", action="store_true", help="List every move played"
    )
    simulate_parser.set_defaults(func=simulate_command)

    # Replay command
    replay_parser = subparsers.add_parser(
        "replay", help="Replay moves from the starting position"
    )
    replay_parser.add_argument(
        "moves", nargs="*", type=parse_position, help="Moves as row,col"
    )
    replay_parser.set_defaults(func=replay_command)

    # Tournament command
    tournament_parser = subparsers.add_parser(
        "tournament", help="Play Easy against Hard over many games"
    )
    tournament_parser.add_argument(
        "--games", type=int, default=20, help="Number of games to play"
    )
    tournament_parser.add_argument(
        "--opening-plies", type=int, default=4, help="Random plies before the policies take over"
    )
    tournament_parser.add_argument("--seed", type=int, default=42, help="Random seed")
    tournament_parser.add_argument(
        "--no-progress", action="store_true", help="Disable the progress bar"
    )
    tournament_parser.set_defaults(func=tournament_command)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
