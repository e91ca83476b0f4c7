"""
Session configuration for TicTacToe.
Where data is kept, timer length and the defaults for a new player.
"""

from pathlib import Path


class SessionConfig:
    """
    Configuration class for session settings.
    Override DATA_DIR (or pass --data-dir) to keep several profiles apart.
    """

    # ==================== STORAGE ====================
    # Directory holding the saved JSON files
    DATA_DIR = Path.home() / ".tictactoe"

    # One file per storage key
    PLAYERS_FILE = "players.json"
    SCORES_FILE = "scores.json"
    SETTINGS_FILE = "settings.json"
    GAME_STATE_FILE = "state.json"

    # ==================== MOVE TIMER ====================
    # Seconds each player gets per move before a random move is made
    MOVE_TIME_SECONDS = 30

    # Remaining seconds from which the timer warns (ticks audibly)
    WARNING_SECONDS = 5

    # ==================== DEFAULTS ====================
    DEFAULT_PLAYER_X = "Player X"
    DEFAULT_PLAYER_O = "Player O"
    COMPUTER_NAME = "Computer"

    DEFAULT_GAME_MODE = "pvp"
    DEFAULT_DIFFICULTY = "easy"
    DEFAULT_SOUND_ENABLED = True
    DEFAULT_DARK_MODE = False

    def __init__(self, data_dir=None):
        if data_dir is not None:
            self.DATA_DIR = Path(data_dir)

    def path_for(self, filename: str) -> Path:
        """Full path of one of the storage files."""
        return Path(self.DATA_DIR) / filename
