"""
AI player for TicTacToe.
Chooses a move for a given mark at one of three difficulty levels.
"""

import random
from enum import Enum
from typing import Any, List, Optional, Sequence, Union

from .game_state import EMPTY, Player
from .win_checker import WinChecker, empty_cells


# Returned when the board has no empty cell left
NO_MOVE = -1

# Chance that MEDIUM plays the heuristic move instead of a random one
MEDIUM_STRATEGY_PROBABILITY = 0.6

CENTER = 4

WIN_SCORE = 10


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Some strategy
    HARD = "hard"        # Full minimax

    @classmethod
    def from_value(cls, value: Any) -> "Difficulty":
        """Look up a difficulty by value or name; unknown values mean EASY."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for difficulty in cls:
                if value.lower() == difficulty.value:
                    return difficulty
        return cls.EASY


class AIPlayer:
    """
    An AI that plays TicTacToe.

    EASY picks a random empty cell. MEDIUM plays the win > block > center
    heuristic most of the time and a random cell otherwise. HARD runs a
    full minimax search and never loses.

    The board passed in is never modified: every search runs on a
    private scratch copy.
    """

    def __init__(self, rng: Optional[random.Random] = None, verbose: bool = False):
        """
        Initialize the AI player.

        Args:
            rng: Random source (default: a fresh random.Random).
            verbose: Print search statistics after each HARD move.
        """
        self.rng = rng if rng is not None else random.Random()
        self.verbose = verbose
        self.win_checker = WinChecker()

        # Keep track of how many positions the last search looked at (for debugging)
        self.positions_evaluated = 0

    def select_move(
        self,
        board: Sequence[str],
        mark: Union[str, Player],
        difficulty: Union[str, Difficulty] = Difficulty.EASY
    ) -> int:
        """
        Choose a move for ``mark``.

        Args:
            board: The 9 cells of the board (left unchanged).
            mark: The mark the AI plays ("X" or "O").
            difficulty: Difficulty level.

        Returns:
            Index of the chosen cell, or NO_MOVE if the board is full.
        """
        mark = Player(mark).value
        difficulty = Difficulty.from_value(difficulty)
        scratch = list(board)

        if difficulty == Difficulty.HARD:
            return self.minimax_move(scratch, mark)
        if difficulty == Difficulty.MEDIUM:
            if self.rng.random() < MEDIUM_STRATEGY_PROBABILITY:
                return self.strategic_move(scratch, mark)
            return self.random_move(scratch)
        return self.random_move(scratch)

    def random_move(self, board: Sequence[str]) -> int:
        """Uniformly random empty cell, or NO_MOVE."""
        available = empty_cells(board)
        if not available:
            return NO_MOVE
        return self.rng.choice(available)

    def strategic_move(self, board: Sequence[str], mark: str) -> int:
        """
        Semi-strategic move:
        1. Win if possible
        2. Block the opponent's win if possible
        3. Take the center if available
        4. Take a random move
        """
        winning_move = self.find_winning_move(board, mark)
        if winning_move != NO_MOVE:
            return winning_move

        blocking_move = self.find_winning_move(board, Player(mark).opposite().value)
        if blocking_move != NO_MOVE:
            return blocking_move

        if board[CENTER] == EMPTY:
            return CENTER

        return self.random_move(board)

    def find_winning_move(self, board: Sequence[str], mark: str) -> int:
        """Cell that completes a line for ``mark``, or NO_MOVE."""
        cell = self.win_checker.find_completing_cell(board, mark)
        return NO_MOVE if cell is None else cell

    def minimax_move(self, board: List[str], mark: str) -> int:
        """
        Best move for ``mark`` by exhaustive minimax.

        Ties keep the lowest index. ``board`` is used as scratch space and is
        restored before returning.

        Note: without pruning this visits up to 9! positions, which is only
        fine because the board is 3x3. Add alpha-beta or memoization before
        using it on anything larger.
        """
        self.positions_evaluated = 0
        opponent = Player(mark).opposite().value

        best_score = float('-inf')
        best_move = NO_MOVE

        for index in empty_cells(board):
            # Try this move
            board[index] = mark
            score = self._minimax(board, 0, False, mark, opponent)
            board[index] = EMPTY

            if score > best_score:
                best_score = score
                best_move = index

        if self.verbose:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(
        self,
        board: List[str],
        depth: int,
        is_maximizing: bool,
        mark: str,
        opponent: str
    ) -> float:
        """
        Score a position from ``mark``'s point of view.

        Args:
            board: Scratch board, mutated and restored in place.
            depth: Plies below the root move (0 at the root's children).
            is_maximizing: True if ``mark`` is to move.
            mark: The AI's mark.
            opponent: The other mark.

        Returns:
            10 - depth for a win, depth - 10 for a loss, 0 for a draw.
        """
        self.positions_evaluated += 1

        # Check terminal states
        winner = self.win_checker.check_winner(board)
        if winner == mark:
            return WIN_SCORE - depth  # Win (prefer faster wins)
        if winner == opponent:
            return depth - WIN_SCORE  # Loss (prefer slower losses)
        if self.win_checker.is_full(board):
            return 0  # Draw

        if is_maximizing:
            best_score = float('-inf')
            for index in empty_cells(board):
                board[index] = mark
                score = self._minimax(board, depth + 1, False, mark, opponent)
                board[index] = EMPTY
                best_score = max(best_score, score)
            return best_score
        else:
            best_score = float('inf')
            for index in empty_cells(board):
                board[index] = opponent
                score = self._minimax(board, depth + 1, True, mark, opponent)
                board[index] = EMPTY
                best_score = min(best_score, score)
            return best_score


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(verbose=True)

    # Test 1: AI should block a winning move
    board = ["X", "X", "",
             "", "", "",
             "", "", ""]
    print("\nAI is O. X is about to win with 2!")
    move = ai.select_move(board, "O", Difficulty.HARD)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = ["O", "O", "",
             "", "X", "",
             "X", "", ""]
    print("\nAI is O. Can win with 2!")
    move = ai.select_move(board, "O", Difficulty.HARD)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("AI correctly takes the win!")

    print("\nAIPlayer test done!")
