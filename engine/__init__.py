"""
Engine module for TicTacToe.
Handles the board, game rules, and the AI opponent.
"""

__version__ = "1.0.0"

from .game_state import GameState, MoveRecord, MoveResult, Player, EMPTY
from .move_validator import MoveValidator
from .win_checker import WinChecker, WIN_PATTERNS
from .board import GameBoard
from .ai_player import AIPlayer, Difficulty, NO_MOVE
