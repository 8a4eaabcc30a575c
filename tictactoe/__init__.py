"""
TicTacToe
=========
Console TicTacToe against an AI that plays out every possible continuation
of the game before it moves.

The game package handles game state, rules, move input, and the AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import (
    GameError,
    InvalidMoveError,
    OutOfBoundsError,
    CellOccupiedError,
    MoveParseError,
    NoLegalMoveError,
    SearchInvariantError,
)
from .game_state import GameState, Mark, Move, Outcome
from .win_checker import WinChecker
from .move_parser import parse_move
from .ai_player import (
    AIPlayer,
    CandidateEvaluation,
    OutcomeTally,
    aggregate_outcomes,
    enumerate_open_cells,
    evaluate_candidate,
    rank_candidates,
)
