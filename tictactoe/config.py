"""
Game configuration for TicTacToe.
All the settings for the board, the AI search, and logging.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Command line flags in main.py override the search and logging values.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Grid value of a cell nobody has marked yet
    EMPTY = 0

    # Text shown for an empty cell when the board is rendered
    EMPTY_SYMBOL = " "

    # Divider printed between rendered rows
    ROW_DIVIDER = "-----"

    # ==================== AI SETTINGS ====================
    # Which side the AI plays by default ("X" moves first)
    AI_PLAYER = "O"

    # Evaluate each candidate move in its own worker process
    PARALLEL_SEARCH = True

    # Worker processes for the search (None = one per CPU)
    MAX_WORKERS = None

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
