"""
Board engine for TicTacToe.
Single source of truth for the grid, turn order and move history.
"""

from typing import Any, Optional, Tuple

from .game_state import GameState, MoveRecord, MoveResult, Player
from .move_validator import MoveValidator
from .win_checker import WinChecker


class GameBoard:
    """
    Owns one game of TicTacToe.

    Moves are applied through ``apply_move`` only. Invalid moves are
    reported through the returned MoveResult and leave the state alone.
    Callers only ever see copies of the internal state.
    """

    def __init__(self):
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self._state = GameState()

    def initialize(self) -> GameState:
        """Reset to an empty board with X to move."""
        self._state = GameState()
        return self.get_state()

    def apply_move(self, index: Any) -> MoveResult:
        """
        Place the current player's mark at ``index``.

        Args:
            index: Cell index (0-8).

        Returns:
            MoveResult describing the new state. ``valid`` is False and the
            state is unchanged if the move was rejected.
        """
        state = self._state
        validation = self.validator.validate_move(state, index)
        if not validation.is_valid:
            return self._result(valid=False, error_message=validation.error_message)

        # Record the move before touching the board
        mover = state.current_player
        state.move_history.append(MoveRecord(index, mover, list(state.board)))

        state.board[index] = mover.value
        self._evaluate()

        # The winner keeps the turn so the final state shows who won
        if not state.game_over:
            state.current_player = mover.opposite()

        return self._result(valid=True)

    def get_state(self) -> GameState:
        """Deep, independent copy of the current state."""
        return self._state.copy()

    def set_state(self, snapshot: Any) -> GameState:
        """
        Restore a previously saved state.

        Args:
            snapshot: A GameState, or the dict produced by ``GameState.to_dict``.

        Returns:
            The restored state. A missing or malformed snapshot resets the board.
        """
        if isinstance(snapshot, GameState):
            snapshot = snapshot.to_dict()

        restored = GameState.from_dict(snapshot)
        if restored is None:
            return self.initialize()

        self._state = restored
        self._evaluate()
        return self.get_state()

    def undo(self) -> Optional[MoveResult]:
        """
        Take back the most recent move.

        Returns:
            MoveResult for the restored state, or None if there is nothing to undo.
        """
        state = self._state
        if not state.move_history:
            return None

        last_move = state.move_history.pop()
        state.board = list(last_move.board)
        state.current_player = last_move.player
        state.game_over = False
        state.winner = None
        state.win_pattern = None
        state.is_draw = False

        return self._result(valid=True)

    def get_win_pattern(self) -> Optional[Tuple[int, int, int]]:
        """The winning cells, or None if nobody has won."""
        return self._state.win_pattern

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    def _evaluate(self):
        """Derive winner, pattern, draw and game over from the board."""
        state = self._state
        line = self.win_checker.get_winning_line(state.board)

        state.win_pattern = line
        state.winner = state.board[line[0]] if line else None
        state.is_draw = line is None and self.win_checker.is_full(state.board)
        state.game_over = state.winner is not None or state.is_draw

    def _result(self, valid: bool, error_message: Optional[str] = None) -> MoveResult:
        state = self._state
        return MoveResult(
            valid=valid,
            board=list(state.board),
            current_player=state.current_player,
            game_over=state.game_over,
            winner=state.winner,
            win_pattern=state.win_pattern,
            is_draw=state.is_draw,
            error_message=error_message,
        )


# Quick test
if __name__ == "__main__":
    print("Testing GameBoard...")

    game = GameBoard()

    # X wins along the top row
    for index in (0, 3, 1, 4, 2):
        result = game.apply_move(index)
        print(f"Move {index}: valid={result.valid} over={result.game_over}")

    game.get_state().print_board()
    assert game.get_win_pattern() == (0, 1, 2)

    game.undo()
    assert not game.game_over

    print("\nGameBoard test done!")
