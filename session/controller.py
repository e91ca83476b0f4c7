"""
Game flow for TicTacToe.

Ties together:
- Engine (board rules and the AI opponent)
- Players (names, mode, difficulty, scores)
- Storage (saved settings and game in progress)
- Move timer

The UI and the console front end both drive a game through this class.
"""

from typing import Callable, Optional

from engine.ai_player import AIPlayer, NO_MOVE
from engine.board import GameBoard
from engine.game_state import MoveResult, Player

from .move_timer import MoveTimer
from .players import GameMode, PlayerRegistry
from .storage import GameStorage


class GameController:
    """
    Main controller for one TicTacToe session.

    Game flow:
    1. start_game() sets up players and an empty board
    2. Humans play with play_cell(); the computer with play_ai_turn()
    3. When a game ends, the score is counted and the saved game cleared
    4. new_round() starts the next game with the same players
    """

    def __init__(
        self,
        storage: Optional[GameStorage] = None,
        ai: Optional[AIPlayer] = None
    ):
        self.storage = storage if storage is not None else GameStorage()
        self.config = self.storage.config

        self.board = GameBoard()
        self.ai = ai if ai is not None else AIPlayer()
        self.players = PlayerRegistry(self.storage)
        self.timer = MoveTimer(
            seconds=self.config.MOVE_TIME_SECONDS,
            warning_seconds=self.config.WARNING_SECONDS,
            on_expire=self.handle_time_up
        )

        # Called with the final MoveResult when a game ends
        self.on_game_over: Optional[Callable[[MoveResult], None]] = None
        # Called with the timed-out mark and the random move's result
        self.on_time_up: Optional[Callable[[Player, MoveResult], None]] = None

        self._result_recorded = False
        # Winner counted for the finished game; None means a draw
        self._recorded_winner: Optional[str] = None

    # ==================== GAME SETUP ====================

    def start_game(
        self,
        player1_name: Optional[str] = None,
        player2_name: Optional[str] = None,
        game_mode=None,
        ai_difficulty=None,
        reset_scores: bool = False
    ):
        """Set up the players and start a fresh game."""
        self.players.initialize(
            player1_name=player1_name,
            player2_name=player2_name,
            game_mode=game_mode,
            ai_difficulty=ai_difficulty,
            reset_scores=reset_scores
        )
        self.new_round()

        players = self.players.get_players()
        print(f"New game: {players[Player.X].name} (X) vs {players[Player.O].name} (O)")

    def new_round(self):
        """Clear the board for the next game, keeping players and scores."""
        self.board.initialize()
        self._result_recorded = False
        self._recorded_winner = None
        self.timer.start()

    def reset_scores(self):
        self.players.reset_scores()

    # ==================== MOVES ====================

    def is_ai_turn(self) -> bool:
        """True when the computer should move next."""
        state = self.board.get_state()
        if state.game_over:
            return False
        return self.players.get_current_player(state.current_player).is_ai

    def play_cell(self, index: int) -> MoveResult:
        """
        Play a human move.

        Args:
            index: Cell index (0-8).

        Returns:
            The board's MoveResult. Moves made while the computer is to
            play are rejected.
        """
        if self.is_ai_turn():
            return self._rejected("Wait for the computer to move!")

        result = self.board.apply_move(index)
        self._after_move(result)
        return result

    def play_ai_turn(self) -> Optional[MoveResult]:
        """
        Let the computer make its move.

        Returns:
            The MoveResult, or None if it is not the computer's turn.
        """
        if not self.is_ai_turn():
            return None

        state = self.board.get_state()
        difficulty = self.players.get_ai_difficulty()
        move = self.ai.select_move(state.board, state.current_player, difficulty)

        if move == NO_MOVE:
            print("ERROR: AI could not find a move!")
            return None

        print(f"AI ({difficulty.value}) plays {state.current_player.value} at {move}")

        result = self.board.apply_move(move)
        self._after_move(result)
        return result

    def undo(self) -> Optional[MoveResult]:
        """
        Take back the last move.

        Against the computer, its reply is taken back too so the human is
        on move again. Undoing the move that ended a game takes its result
        back off the scoreboard.

        Returns:
            The MoveResult of the last undo, or None if there was nothing to undo.
        """
        was_over = self.board.get_state().game_over
        result = self.board.undo()
        if result is None:
            return None

        if was_over and self._result_recorded:
            self.players.revoke_score(self._recorded_winner)
            self._result_recorded = False
            self._recorded_winner = None

        while self.is_ai_turn():
            again = self.board.undo()
            if again is None:
                break
            result = again

        self.timer.reset()
        return result

    def handle_time_up(self) -> Optional[MoveResult]:
        """Make a random move for the player whose time ran out."""
        state = self.board.get_state()
        if state.game_over:
            return None

        move = self.ai.random_move(state.board)
        if move == NO_MOVE:
            return None

        name = self.players.get_current_player(state.current_player).name
        print(f"Time's up! Random move made for {name}: {move}")

        result = self.board.apply_move(move)
        self._after_move(result)

        if self.on_time_up is not None:
            self.on_time_up(state.current_player, result)
        return result

    def _after_move(self, result: MoveResult):
        if not result.valid:
            return
        if result.game_over:
            self._finish_game(result)
        else:
            self.timer.reset()

    def _finish_game(self, result: MoveResult):
        """Count the result once and clear the saved game."""
        self.timer.stop()
        if self._result_recorded:
            return
        self._result_recorded = True
        self._recorded_winner = None if result.is_draw else result.winner

        self.players.update_score(self._recorded_winner)
        self.storage.clear_game_state()

        print(self.describe_status())

        if self.on_game_over is not None:
            self.on_game_over(result)

    def _rejected(self, message: str) -> MoveResult:
        state = self.board.get_state()
        return MoveResult(
            valid=False,
            board=state.board,
            current_player=state.current_player,
            game_over=state.game_over,
            winner=state.winner,
            win_pattern=state.win_pattern,
            is_draw=state.is_draw,
            error_message=message
        )

    # ==================== SAVED SESSION ====================

    def save_session(self) -> bool:
        """
        Save the game in progress.

        Returns:
            True if something was saved. Finished and untouched games are not.
        """
        state = self.board.get_state()
        if state.game_over or not state.is_started():
            return False

        self.storage.save_game_state({
            "board": state.to_dict(),
            "players": {
                "game_mode": self.players.get_game_mode().value,
                "ai_difficulty": self.players.get_ai_difficulty().value,
            },
        })
        return True

    def has_saved_session(self) -> bool:
        return self.storage.get_game_state() is not None

    def load_saved_session(self) -> bool:
        """
        Resume the saved game, if any.

        Returns:
            True if a game in progress was restored.
        """
        saved = self.storage.get_game_state()
        if saved is None:
            return False

        settings = saved.get("players")
        if not isinstance(settings, dict):
            settings = {}
        self.players.initialize(
            game_mode=settings.get("game_mode"),
            ai_difficulty=settings.get("ai_difficulty")
        )
        state = self.board.set_state(saved.get("board"))

        if not state.is_started() or state.game_over:
            print("Saved game could not be restored, starting fresh.")
            self.storage.clear_game_state()
            self.new_round()
            return False

        self._result_recorded = False
        self.timer.start()
        print("Saved game restored.")
        return True

    def discard_saved_session(self):
        self.storage.clear_game_state()

    # ==================== STATUS ====================

    def describe_status(self) -> str:
        """One line describing whose turn it is, or how the game ended."""
        state = self.board.get_state()
        if state.game_over:
            if state.is_draw:
                return "It's a draw!"
            return f"{self.players.get_current_player(state.winner).name} wins!"
        name = self.players.get_current_player(state.current_player).name
        return f"{name}'s turn ({state.current_player.value})"

    @property
    def is_vs_computer(self) -> bool:
        return self.players.get_game_mode() == GameMode.PVC
