"""
Move parser for TicTacToe.
Turns a line typed by a player into grid coordinates.
"""

from typing import Tuple

from .errors import MoveParseError


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse a move of the form "<x>,<y>".

    Whitespace around each number is ignored. Range checking is left to
    GameState.place, so "5,5" parses fine and is rejected there.

    Args:
        text: The line the player typed.

    Returns:
        (x, y) as integers.

    Raises:
        MoveParseError: Wrong number of tokens, or a token is not an integer.
    """
    tokens = [token.strip() for token in text.split(",")]
    if len(tokens) != 2:
        raise MoveParseError(text, f"expected 2 coordinates, got {len(tokens)}")

    try:
        x, y = int(tokens[0]), int(tokens[1])
    except ValueError as e:
        raise MoveParseError(text, "coordinates must be whole numbers") from e

    return x, y
