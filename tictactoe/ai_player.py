"""
AI player for TicTacToe.
Plays out every possible continuation of the game and picks the move whose
continuations lose least often.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .config import GameConfig
from .errors import InvalidMoveError, NoLegalMoveError, SearchInvariantError
from .game_state import GameState, Mark, Outcome

logger = logging.getLogger(__name__)


@dataclass
class OutcomeTally:
    """
    Counts of finished games reachable from a position, from one side's view.
    """
    wins: int = 0
    ties: int = 0
    losses: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.ties + self.losses

    def record(self, outcome: Outcome, perspective: Mark) -> None:
        """Count one finished game as a win, tie or loss for `perspective`."""
        if outcome == Outcome.TIE:
            self.ties += 1
        elif outcome.winner == perspective:
            self.wins += 1
        else:
            self.losses += 1

    def rank_key(self) -> Tuple[int, int, int]:
        """Sort key: fewest losses first, then most wins, then most ties."""
        return (self.losses, -self.wins, -self.ties)

    def __add__(self, other: "OutcomeTally") -> "OutcomeTally":
        return OutcomeTally(
            wins=self.wins + other.wins,
            ties=self.ties + other.ties,
            losses=self.losses + other.losses,
        )

    def __iadd__(self, other: "OutcomeTally") -> "OutcomeTally":
        self.wins += other.wins
        self.ties += other.ties
        self.losses += other.losses
        return self

    def __str__(self) -> str:
        return f"{self.wins} wins / {self.ties} ties / {self.losses} losses"


@dataclass(frozen=True)
class CandidateEvaluation:
    """A candidate move and the tally of the games that follow it."""
    x: int
    y: int
    tally: OutcomeTally

    @property
    def move(self) -> Tuple[int, int]:
        return (self.x, self.y)


def enumerate_open_cells(state: GameState) -> Iterator[Tuple[int, int]]:
    """
    Yield every empty cell as (x, y), row 0 first, left to right.

    Recomputed from the grid on every call.
    """
    # argwhere walks the grid in row-major order and gives (row, col) pairs
    for y, x in np.argwhere(state.grid == GameConfig.EMPTY):
        yield int(x), int(y)


def _play_copy(state: GameState, x: int, y: int) -> GameState:
    """Copy `state`, play the current player's mark at (x, y), pass the turn."""
    branch = state.copy()
    try:
        branch.place(x, y, branch.current_player)
    except InvalidMoveError as e:
        raise SearchInvariantError(
            f"Search tried an illegal move at ({x}, {y}): {e}"
        ) from e
    branch.advance_turn()
    return branch


def _count_outcomes(state: GameState, perspective: Mark) -> OutcomeTally:
    tally = OutcomeTally()

    if state.is_terminal():
        tally.record(state.outcome, perspective)
        return tally

    for x, y in enumerate_open_cells(state):
        tally += _count_outcomes(_play_copy(state, x, y), perspective)

    return tally


def aggregate_outcomes(
    state: GameState,
    perspective: Mark,
    tally: Optional[OutcomeTally] = None
) -> OutcomeTally:
    """
    Count every finished game reachable from `state` by legal play.

    There is no pruning and no caching: each branch is played on its own copy
    of the state all the way to the end, and the branch tallies are summed.

    Args:
        state: Position to explore. It is not modified.
        perspective: The side the wins and losses are counted for.
        tally: Optional accumulator. When given, the counts are added to it
            and it is returned.

    Returns:
        The tally of terminal positions (exactly one if `state` is finished).

    Raises:
        SearchInvariantError: The rules rejected a move the search chose.
    """
    result = _count_outcomes(state, perspective)
    if tally is None:
        return result
    tally += result
    return tally


def evaluate_candidate(state: GameState, x: int, y: int) -> CandidateEvaluation:
    """
    Play the current player's mark at (x, y) on a copy and tally the games
    that follow, from the mover's point of view.

    Module level so it can run in a worker process.
    """
    mover = state.current_player
    branch = _play_copy(state, x, y)
    return CandidateEvaluation(x=x, y=y, tally=aggregate_outcomes(branch, mover))


def rank_candidates(evaluations: Sequence[CandidateEvaluation]) -> List[CandidateEvaluation]:
    """
    Order candidates best first.

    Fewest losses wins; ties on losses go to the most wins, then the most
    ties. Equal tallies keep their original (row-major) order.
    """
    return sorted(evaluations, key=lambda evaluation: evaluation.tally.rank_key())


class AIPlayer:
    """
    An AI that plays TicTacToe by exhaustive enumeration.

    For every open cell it plays the game out in every possible way and
    counts how the games end. It never takes a move with more losing
    continuations than another, and among equally safe moves prefers the one
    with the most wins, then the most ties.
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        parallel: Optional[bool] = None,
        max_workers: Optional[int] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            parallel: Evaluate candidate moves in worker processes
                (default: GameConfig.PARALLEL_SEARCH)
            max_workers: Worker process count (default: GameConfig.MAX_WORKERS)
        """
        self.player = player
        self.parallel = GameConfig.PARALLEL_SEARCH if parallel is None else parallel
        self.max_workers = GameConfig.MAX_WORKERS if max_workers is None else max_workers

        # Finished games counted by the last evaluation (for debugging)
        self.positions_evaluated = 0

    def evaluate_moves(self, game_state: GameState) -> List[CandidateEvaluation]:
        """
        Evaluate every open cell for the player to move.

        Args:
            game_state: Current game state. It is not modified.

        Returns:
            All candidates, best first. Empty if the grid is full.
        """
        candidates = list(enumerate_open_cells(game_state))

        if self.parallel and len(candidates) > 1:
            evaluations = self._evaluate_parallel(game_state, candidates)
        else:
            evaluations = [evaluate_candidate(game_state, x, y) for x, y in candidates]

        self.positions_evaluated = sum(evaluation.tally.total for evaluation in evaluations)
        return rank_candidates(evaluations)

    def _evaluate_parallel(
        self,
        game_state: GameState,
        candidates: List[Tuple[int, int]]
    ) -> List[CandidateEvaluation]:
        """Evaluate each candidate in its own worker process."""
        with ProcessPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(evaluate_candidate, game_state, x, y)
                for x, y in candidates
            ]
            # Results are collected in candidate order, whatever order they finish in
            return [future.result() for future in futures]

    def select_move(self, game_state: GameState) -> Tuple[int, int]:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            (x, y) of the best move.

        Raises:
            NoLegalMoveError: No open cell is left.
        """
        if game_state.current_player != self.player:
            logger.warning(
                "Selecting a move for %s while the AI plays %s",
                game_state.current_player, self.player
            )

        ranked = self.evaluate_moves(game_state)

        if not ranked:
            raise NoLegalMoveError("No open cell left to play")

        for evaluation in ranked:
            logger.debug("Candidate %s: %s", evaluation.move, evaluation.tally)

        best = ranked[0]
        logger.info(
            "AI evaluated %d positions. Best move: %s (%s)",
            self.positions_evaluated, best.move, best.tally
        )

        return best.move

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion for whoever is to move.

        Args:
            game_state: Current game state.

        Returns:
            A string describing the suggested move.
        """
        ranked = self.evaluate_moves(game_state)

        if not ranked:
            return "No moves available!"

        best = ranked[0]
        return f"Try {best.x},{best.y} ({best.tally})"


# Quick demo
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=GameConfig.LOG_FORMAT)

    ai = AIPlayer(Mark.O, parallel=False)

    # X threatens the top row at (2, 0)
    game = GameState()
    game.place(0, 0, Mark.X).advance_turn()
    game.place(1, 1, Mark.O).advance_turn()
    game.place(1, 0, Mark.X).advance_turn()

    print(game)
    print(f"\nAI plays O. X is about to win with 2,0. AI's move: {ai.select_move(game)}")
