"""
Game state for TicTacToe.
Tracks the board, current player, result flags and move history.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field


EMPTY = ""
BOARD_CELLS = 9


class Player(str, Enum):
    """The two marks in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


def empty_board() -> List[str]:
    return [EMPTY] * BOARD_CELLS


@dataclass
class MoveRecord:
    """
    One applied move, kept so it can be undone.
    """
    index: int              # Cell the mark was written to (0-8)
    player: Player          # Who made the move
    board: List[str]        # Board as it was before the move

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "player": self.player.value, "board": list(self.board)}


@dataclass
class MoveResult:
    """Outcome of applying (or undoing) a move."""
    valid: bool
    board: List[str]
    current_player: Player
    game_over: bool = False
    winner: Optional[str] = None
    win_pattern: Optional[Tuple[int, int, int]] = None
    is_draw: bool = False
    error_message: Optional[str] = None


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 9 cells of the board, row-major ("" means empty)
    - Current player
    - Game status (ongoing, won, draw) and the winning pattern
    - Move history (for undo)
    """

    board: List[str] = field(default_factory=empty_board)

    # Current player's turn
    current_player: Player = Player.X

    # Game result
    game_over: bool = False
    winner: Optional[str] = None
    win_pattern: Optional[Tuple[int, int, int]] = None
    is_draw: bool = False

    # Move history, oldest first
    move_history: List[MoveRecord] = field(default_factory=list)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            game_over=self.game_over,
            winner=self.winner,
            win_pattern=self.win_pattern,
            is_draw=self.is_draw,
            move_history=[
                MoveRecord(record.index, record.player, list(record.board))
                for record in self.move_history
            ],
        )

    def is_started(self) -> bool:
        """True once at least one cell holds a mark."""
        return any(cell != EMPTY for cell in self.board)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly snapshot, the shape persisted between sessions."""
        return {
            "board": list(self.board),
            "current_player": self.current_player.value,
            "game_over": self.game_over,
            "winner": self.winner,
            "win_pattern": list(self.win_pattern) if self.win_pattern else None,
            "is_draw": self.is_draw,
            "move_history": [record.to_dict() for record in self.move_history],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Optional["GameState"]:
        """
        Build a state from a snapshot produced by ``to_dict``.

        Only the shape is checked here; result flags are left for the
        caller to re-derive from the board.

        Returns:
            The parsed state, or None if the snapshot is missing or malformed.
        """
        if not isinstance(data, dict):
            return None

        board = _parse_board(data.get("board"))
        if board is None:
            return None

        player = _parse_player(data.get("current_player") or Player.X.value)
        if player is None:
            return None

        raw_history = data.get("move_history") or []
        if not isinstance(raw_history, list):
            return None

        history = []
        for entry in raw_history:
            if not isinstance(entry, dict):
                return None
            index = entry.get("index")
            actor = _parse_player(entry.get("player"))
            before = _parse_board(entry.get("board"))
            if not _is_cell_index(index) or actor is None or before is None:
                return None
            history.append(MoveRecord(index, actor, before))

        return cls(board=board, current_player=player, move_history=history)

    def render(self) -> str:
        """Text drawing of the board; empty cells show their index."""
        lines = []
        for row in range(3):
            cells = []
            for col in range(3):
                index = row * 3 + col
                cells.append(self.board[index] or str(index))
            lines.append(" " + " | ".join(cells))
        return "\n---+---+---\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.render())

        # Print game info
        if self.game_over:
            if self.winner:
                print(f"\n{self.winner} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")


def _is_cell_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < BOARD_CELLS


def _parse_board(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list) or len(value) != BOARD_CELLS:
        return None
    if any(cell not in (EMPTY, Player.X.value, Player.O.value) for cell in value):
        return None
    return list(value)


def _parse_player(value: Any) -> Optional[Player]:
    if not isinstance(value, str):
        return None
    try:
        return Player(value)
    except ValueError:
        return None


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    state = GameState()
    state.board[4] = "X"
    state.current_player = Player.O
    state.print_board()

    restored = GameState.from_dict(state.to_dict())
    assert restored is not None and restored.board == state.board
    assert GameState.from_dict({"board": ["?"] * 9}) is None

    print("\nGame state test done!")
