"""
Display module for TicTacToe.
Handles board drawing and colour themes.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
