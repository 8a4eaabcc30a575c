"""Shared pytest fixtures and markers for all tests."""

import pytest

from tictactoe.ai_player import AIPlayer
from tictactoe.game_state import GameState, Mark


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def play_moves(state, moves):
    """Play (x, y) moves in turn order, starting with the current player."""
    for x, y in moves:
        state.place(x, y, state.current_player)
        state.advance_turn()
    return state


@pytest.fixture
def empty_state():
    """A fresh game, X to move."""
    return GameState()


@pytest.fixture
def center_state():
    """X has taken the center, O to move."""
    return play_moves(GameState(), [(1, 1)])


@pytest.fixture
def tie_moves():
    """A full game that fills the grid without a line:

    X|O|X
    -----
    X|O|O
    -----
    O|X|X
    """
    return [(0, 0), (1, 0), (2, 0), (1, 1), (0, 1), (2, 1), (1, 2), (0, 2), (2, 2)]


@pytest.fixture
def sequential_ai():
    """An O player that searches in-process."""
    return AIPlayer(Mark.O, parallel=False)
