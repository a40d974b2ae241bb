"""
Computer-vs-computer games.

Used to compare the policies against each other. Both policies are
deterministic, so a tournament varies the games with a few seeded random
opening plies and alternates which difficulty plays which colour.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from tqdm import tqdm

from ..core import (
    Cell,
    GameMode,
    GameState,
    Position,
    Winner,
    apply_move,
    final_summary,
    is_terminal,
    legal_moves,
    start_game,
)
from .policy import Difficulty, choose_ai_move

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """One finished computer-vs-computer game."""

    player1: Difficulty
    player2: Difficulty
    moves: List[Position]
    final_state: GameState

    @property
    def winner(self) -> Winner:
        return final_summary(self.final_state).winner

    @property
    def winning_difficulty(self) -> Optional[Difficulty]:
        """Difficulty of the winning side, None for a draw."""
        if self.winner == Winner.PLAYER1:
            return self.player1
        if self.winner == Winner.PLAYER2:
            return self.player2
        return None


@dataclass
class TournamentResult:
    """Aggregated results of a series of games."""

    games: List[GameRecord] = field(default_factory=list)

    @property
    def wins(self) -> Dict[Difficulty, int]:
        counts = {d: 0 for d in Difficulty}
        for game in self.games:
            winner = game.winning_difficulty
            if winner is not None:
                counts[winner] += 1
        return counts

    @property
    def draws(self) -> int:
        return sum(1 for game in self.games if game.winning_difficulty is None)


def play_game(
    player1: Difficulty,
    player2: Difficulty,
    opening: Tuple[Position, ...] = (),
) -> GameRecord:
    """
    Play a full game between two policies.

    Args:
        player1: Policy for Player 1
        player2: Policy for Player 2
        opening: Moves played before the policies take over

    Returns:
        GameRecord with every move played and the final state
    """
    state = start_game(GameMode.TWO_PLAYER)
    moves = []

    for pos in opening:
        state = apply_move(state, pos)
        moves.append(pos)

    while not is_terminal(state):
        difficulty = player1 if state.current_player == Cell.PLAYER1 else player2
        move = choose_ai_move(state, difficulty)
        if move is None:
            # The side to move is stuck, which the terminal rule already covers
            break
        state = apply_move(state, move.position)
        moves.append(move.position)

    return GameRecord(player1=player1, player2=player2, moves=moves, final_state=state)


def random_opening(num_plies: int, rng: random.Random) -> Tuple[Position, ...]:
    """Pick up to num_plies random legal moves from the starting position."""
    state = start_game(GameMode.TWO_PLAYER)
    opening = []

    for _ in range(num_plies):
        if is_terminal(state):
            break
        pos = rng.choice(legal_moves(state.board, state.current_player)).position
        state = apply_move(state, pos)
        opening.append(pos)

    return tuple(opening)


def run_tournament(
    num_games: int,
    opening_plies: int = 4,
    seed: int = 42,
    show_progress: bool = True,
) -> TournamentResult:
    """
    Play Easy against Hard repeatedly.

    Args:
        num_games: Number of games to play
        opening_plies: Random plies played before the policies take over
        seed: Random seed for reproducibility
        show_progress: Show a tqdm progress bar

    Returns:
        TournamentResult with every game played
    """
    rng = random.Random(seed)
    result = TournamentResult()

    logger.info(f"Playing {num_games} games (opening plies: {opening_plies}, seed: {seed})")

    with tqdm(total=num_games, desc="Tournament", unit=" game", disable=not show_progress) as pbar:
        for game_idx in range(num_games):
            opening = random_opening(opening_plies, rng)
            if game_idx % 2 == 0:
                record = play_game(Difficulty.EASY, Difficulty.HARD, opening)
            else:
                record = play_game(Difficulty.HARD, Difficulty.EASY, opening)
            result.games.append(record)

            wins = result.wins
            pbar.set_postfix(
                easy=wins[Difficulty.EASY], hard=wins[Difficulty.HARD], draws=result.draws
            )
            pbar.update(1)

    return result
