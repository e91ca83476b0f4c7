"""
Session module for TicTacToe.
Handles players, scores, saved games, the move timer and game flow.
"""

from .config import SessionConfig
from .storage import GameStorage
from .players import GameMode, PlayerInfo, PlayerRegistry, Scores
from .move_timer import MoveTimer
from .controller import GameController
