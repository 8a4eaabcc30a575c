"""
Game state management for TicTacToe.
Tracks the grid, the current player, and the result of the game.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig
from .errors import CellOccupiedError, OutOfBoundsError
from .win_checker import WinChecker


class Mark(Enum):
    """The two marks in the game. The value is what gets stored in the grid."""
    X = 1
    O = 2

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X

    def __str__(self) -> str:
        return self.name


class Outcome(Enum):
    """How a finished game ended."""
    X_WINS = "X Wins!"
    O_WINS = "O Wins!"
    TIE = "It's a tie!"

    @classmethod
    def from_mark(cls, mark: Mark) -> "Outcome":
        """The outcome of `mark` completing a line."""
        return cls.X_WINS if mark == Mark.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark, or None for a tie."""
        if self == Outcome.X_WINS:
            return Mark.X
        if self == Outcome.O_WINS:
            return Mark.O
        return None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    x: int                  # Column (0-2)
    y: int                  # Row (0-2)
    move_number: int        # Which move this is (0-8)


def _empty_grid() -> np.ndarray:
    size = GameConfig.BOARD_SIZE
    return np.full((size, size), GameConfig.EMPTY, dtype=np.int8)


_win_checker = WinChecker()


@dataclass(eq=False)
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 grid (which marks are where)
    - Current player
    - Move history
    - Game result (None while the game is running)

    States are cheap to copy, so the AI explores hypothetical games on
    copies and never touches the real one.
    """

    # The 3x3 grid, indexed grid[y, x]. EMPTY or a Mark value per cell.
    grid: np.ndarray = field(default_factory=_empty_grid)

    # Current player's turn
    current_player: Mark = Mark.X

    # Game result, set once and never cleared
    outcome: Optional[Outcome] = None

    # Move history
    moves: List[Move] = field(default_factory=list)

    def cell(self, x: int, y: int) -> Optional[Mark]:
        """Get the mark at (x, y), or None if the cell is empty."""
        value = self.grid[y, x]
        if value == GameConfig.EMPTY:
            return None
        return Mark(int(value))

    def place(self, x: int, y: int, mark: Mark) -> "GameState":
        """
        Place a mark at the given position and check whether the game ended.

        Args:
            x: Column index (0-2).
            y: Row index (0-2).
            mark: The mark to place.

        Returns:
            This state, for chaining.

        Raises:
            OutOfBoundsError: x or y is outside the grid.
            CellOccupiedError: The cell already holds a mark.
        """
        size = GameConfig.BOARD_SIZE
        if not 0 <= x < size:
            raise OutOfBoundsError("x", x)
        if not 0 <= y < size:
            raise OutOfBoundsError("y", y)
        if self.grid[y, x] != GameConfig.EMPTY:
            raise CellOccupiedError(x, y)

        self.grid[y, x] = mark.value
        self.moves.append(Move(mark=mark, x=x, y=y, move_number=len(self.moves)))

        # A recorded outcome is final
        if self.outcome is None:
            if _win_checker.completes_line(self.grid, x, y, mark.value):
                self.outcome = Outcome.from_mark(mark)
            elif self.is_full():
                self.outcome = Outcome.TIE

        return self

    def advance_turn(self) -> Mark:
        """Hand the turn to the other player and return who moves now."""
        self.current_player = self.current_player.opposite()
        return self.current_player

    def is_full(self) -> bool:
        """True if every cell holds a mark."""
        return bool(np.all(self.grid != GameConfig.EMPTY))

    def is_terminal(self) -> bool:
        """True once the game has a result."""
        return self.outcome is not None

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            grid=self.grid.copy(),
            current_player=self.current_player,
            outcome=self.outcome,
            moves=list(self.moves),
        )

    def render(self) -> str:
        """
        Render the grid as text, one line per row.

        Cells are separated by '|', rows by a divider line, and empty cells
        show as a blank.
        """
        size = GameConfig.BOARD_SIZE
        rows = []
        for y in range(size):
            symbols = []
            for x in range(size):
                mark = self.cell(x, y)
                symbols.append(GameConfig.EMPTY_SYMBOL if mark is None else str(mark))
            rows.append("|".join(symbols))
        return f"\n{GameConfig.ROW_DIVIDER}\n".join(rows)

    def __str__(self) -> str:
        return self.render()
