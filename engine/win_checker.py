"""
Win checker for TicTacToe.
Checks if a mark has won or if the game is a draw.
"""

from typing import Optional, List, Sequence, Tuple

from .game_state import EMPTY


# All possible winning lines, as cell indices in row-major order.
# The order matters: the first matching pattern is the one reported.
WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells holding the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WIN_PATTERNS

    def check_winner(self, board: Sequence[str]) -> Optional[str]:
        """
        Check if there's a winner.

        Args:
            board: The 9 cells of the board.

        Returns:
            The winning mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Sequence[str]) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The 9 cells of the board.

        Returns:
            The first winning pattern in the fixed scan order, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] != EMPTY and board[a] == board[b] == board[c]:
                return line
        return None

    def is_full(self, board: Sequence[str]) -> bool:
        """True if no cell is empty."""
        return EMPTY not in board

    def check_draw(self, board: Sequence[str]) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and nobody has won.

        Args:
            board: The 9 cells of the board.

        Returns:
            True if the game is a draw.
        """
        if self.get_winning_line(board) is not None:
            return False
        return self.is_full(board)

    def find_completing_cell(self, board: Sequence[str], mark: str) -> Optional[int]:
        """
        Find a cell that would complete a line for the given mark.

        A line qualifies when two of its cells hold ``mark`` and the
        third is empty. Lines are scanned in the fixed order and the
        first qualifying one wins.

        Args:
            board: The 9 cells of the board.
            mark: The mark to complete a line for.

        Returns:
            The index of the completing cell, or None.
        """
        for a, b, c in self.WINNING_LINES:
            if board[a] == mark and board[b] == mark and board[c] == EMPTY:
                return c
            if board[a] == mark and board[c] == mark and board[b] == EMPTY:
                return b
            if board[b] == mark and board[c] == mark and board[a] == EMPTY:
                return a
        return None


def empty_cells(board: Sequence[str]) -> List[int]:
    """Indices of all empty cells, in ascending order."""
    return [index for index, cell in enumerate(board) if cell == EMPTY]


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    board1 = ["X", "X", "X",
              "", "O", "",
              "O", "", ""]
    winner = checker.check_winner(board1)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == "X"

    # Test 2: Vertical win
    board2 = ["O", "X", "",
              "O", "X", "",
              "O", "", "X"]
    winner = checker.check_winner(board2)
    print(f"Test 2 (vertical): winner = {winner}")
    assert winner == "O"

    # Test 3: Diagonal win
    board3 = ["X", "O", "",
              "", "X", "O",
              "", "", "X"]
    print(f"Test 3 (diagonal): line = {checker.get_winning_line(board3)}")
    assert checker.get_winning_line(board3) == (0, 4, 8)

    # Test 4: Draw (full board, no winner)
    board4 = ["X", "O", "X",
              "X", "O", "O",
              "O", "X", "X"]
    is_draw = checker.check_draw(board4)
    print(f"Test 4 (draw): is_draw = {is_draw}")
    assert is_draw

    print("\nWinChecker test done!")
