"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Any, Optional
from dataclasses import dataclass

from .game_state import BOARD_CELLS, EMPTY, GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be a cell of the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index: Any) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark in (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-8."
            )

        # Check if cell is empty
        if game_state.board[index] != EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {game_state.board[index]}"
            )

        return ValidationResult(is_valid=True)
