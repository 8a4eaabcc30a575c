"""
Main orchestration script for TicTacToe.

This script ties together:
- Move input (reading "x,y" lines from the player)
- Logic (game state, rules, AI)
- Output (printing the board and the result)

Run this script to play TicTacToe against the AI!
"""

import logging
from typing import Callable, Optional, Tuple

from tictactoe.ai_player import AIPlayer
from tictactoe.config import GameConfig
from tictactoe.errors import InvalidMoveError, MoveParseError
from tictactoe.game_state import GameState, Mark, Outcome
from tictactoe.move_parser import parse_move
from tictactoe.win_checker import WinChecker

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")
HINT_COMMAND = "hint"


class GameSession:
    """
    One game of TicTacToe on the console.

    Game flow:
    1. Whoever's turn it is picks a cell (the human types "x,y", the AI searches)
    2. The move is applied to the game state and the board is printed
    3. The turn passes to the other side
    4. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        ai_player: Optional[Mark] = Mark.O,
        ai: Optional[AIPlayer] = None,
        input_fn: Optional[Callable[[], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize a game session.

        Args:
            ai_player: Which mark the AI plays, or None for two humans.
            ai: The AI used for its moves and for hints (default: a new AIPlayer).
            input_fn: Reads one line of player input (default: input).
            output_fn: Writes one line of output (default: print).
        """
        self.state = GameState()
        self.ai_player = ai_player
        self.ai = ai if ai is not None else AIPlayer(ai_player or Mark.O)
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.win_checker = WinChecker()

    def play(self) -> Optional[Outcome]:
        """
        Run the game until it ends.

        Returns:
            The outcome, or None if a player quit.
        """
        while not self.state.is_terminal():
            mark = self.state.current_player

            if mark == self.ai_player:
                x, y = self.ai.select_move(self.state)
                self.output_fn(f"{mark} plays {x},{y}")
                self.state.place(x, y, mark)
            else:
                move = self._read_human_move()
                if move is None:
                    return None
                try:
                    self.state.place(move[0], move[1], mark)
                except InvalidMoveError as e:
                    self.output_fn(str(e))
                    continue

            self.output_fn(self.state.render())
            self.state.advance_turn()

        self._show_game_result()
        return self.state.outcome

    def _read_human_move(self) -> Optional[Tuple[int, int]]:
        """
        Prompt until the player types something that parses as a move.

        Returns:
            (x, y), or None if the player quit or input ran out.
        """
        while True:
            self.output_fn(f"{self.state.current_player}: What is your move?")

            try:
                line = self.input_fn()
            except EOFError:
                return None

            command = line.strip().lower()
            if command in QUIT_COMMANDS:
                return None
            if command == HINT_COMMAND:
                self.output_fn(self.ai.get_move_suggestion(self.state))
                continue

            try:
                return parse_move(line)
            except MoveParseError as e:
                logger.debug("%s", e)
                self.output_fn("I didn't understand that.")

    def _show_game_result(self):
        """Show the final game result."""
        line = self.win_checker.get_winning_line(self.state.grid)
        if line is not None:
            logger.info("Winning line: %s", line)
        self.output_fn(str(self.state.outcome))


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Two humans, no AI moves (hints still work)"
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Evaluate AI moves in this process instead of a worker pool"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=GameConfig.MAX_WORKERS,
        help="Worker processes for the AI search (default: one per CPU)"
    )
    parser.add_argument(
        "--log-level",
        default=GameConfig.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=GameConfig.LOG_FORMAT)

    # Determine players
    if args.two_player:
        ai_player = None
    elif args.ai_first:
        ai_player = Mark.X
    else:
        ai_player = Mark[GameConfig.AI_PLAYER]

    ai = AIPlayer(
        ai_player or Mark.O,
        parallel=GameConfig.PARALLEL_SEARCH and not args.sequential,
        max_workers=args.workers
    )
    session = GameSession(ai_player=ai_player, ai=ai)

    try:
        session.play()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
