"""
Errors raised by the TicTacToe engines.

Invalid moves and unparseable input are recoverable: the turn loop reports
them and asks again. The search errors mean something is wrong with the
program itself.
"""


class GameError(Exception):
    """Base class for all game errors."""


class InvalidMoveError(GameError):
    """A placement that breaks the rules. The game state is left unchanged."""


class OutOfBoundsError(InvalidMoveError):
    """A coordinate outside the 3x3 grid."""

    def __init__(self, axis: str, value: int):
        self.axis = axis
        self.value = value
        super().__init__(f"{axis} out of bounds")


class CellOccupiedError(InvalidMoveError):
    """The target cell already holds a mark."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__("Cannot mark a non-empty space")


class MoveParseError(GameError):
    """Move text that is not of the form <x>,<y>."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Could not parse move {text!r}: {reason}")


class NoLegalMoveError(GameError):
    """The AI was asked to move on a grid with no open cell."""


class SearchInvariantError(GameError):
    """The search tried a move the rules rejected."""
