"""
Player management for TicTacToe.
Keeps player names, the game mode, AI difficulty and the scoreboard.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional, Union

from engine.ai_player import Difficulty
from engine.game_state import Player

from .storage import GameStorage


class GameMode(Enum):
    """Who plays O."""
    PVP = "pvp"    # Two humans
    PVC = "pvc"    # Human (X) versus computer (O)

    @classmethod
    def from_value(cls, value: Any) -> "GameMode":
        """Look up a mode by value; unknown values mean PVP."""
        if isinstance(value, cls):
            return value
        for mode in cls:
            if value == mode.value:
                return mode
        return cls.PVP


@dataclass
class PlayerInfo:
    """One seat at the board."""
    name: str
    is_ai: bool = False


@dataclass
class Scores:
    """Games won by each mark, and draws."""
    x: int = 0
    o: int = 0
    draw: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Scores":
        def count(key):
            value = data.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, int):
                return 0
            return max(value, 0)
        return cls(x=count("x"), o=count("o"), draw=count("draw"))


class PlayerRegistry:
    """
    The players of the current session and their running scores.

    Every change is written through to storage straight away so a
    restart picks up where the last session stopped.
    """

    def __init__(self, storage: GameStorage):
        self.storage = storage
        config = storage.config

        self.players: Dict[Player, PlayerInfo] = {
            Player.X: PlayerInfo(config.DEFAULT_PLAYER_X),
            Player.O: PlayerInfo(config.DEFAULT_PLAYER_O),
        }
        self.scores = Scores()
        self.game_mode = GameMode.from_value(config.DEFAULT_GAME_MODE)
        self.ai_difficulty = Difficulty.from_value(config.DEFAULT_DIFFICULTY)

    def initialize(
        self,
        player1_name: Optional[str] = None,
        player2_name: Optional[str] = None,
        game_mode: Union[str, GameMode, None] = None,
        ai_difficulty: Union[str, Difficulty, None] = None,
        reset_scores: bool = False
    ) -> Dict[str, Any]:
        """
        Set up the players, falling back to saved values and then defaults.

        Args:
            player1_name: Name for X.
            player2_name: Name for O (ignored against the computer).
            game_mode: "pvp" or "pvc".
            ai_difficulty: "easy", "medium" or "hard".
            reset_scores: Start the scoreboard from zero.

        Returns:
            Summary dict with players, scores, game_mode and ai_difficulty.
        """
        config = self.storage.config
        saved_players = self.storage.get_players()
        saved_settings = self.storage.get_settings()

        self.game_mode = GameMode.from_value(
            game_mode or saved_settings.get("game_mode") or config.DEFAULT_GAME_MODE
        )
        self.ai_difficulty = Difficulty.from_value(
            ai_difficulty or saved_settings.get("ai_difficulty") or config.DEFAULT_DIFFICULTY
        )

        self.players = {
            Player.X: PlayerInfo(player1_name or saved_players.get("x") or config.DEFAULT_PLAYER_X),
            Player.O: PlayerInfo(player2_name or saved_players.get("o") or config.DEFAULT_PLAYER_O),
        }
        self._apply_game_mode()

        if reset_scores:
            self.scores = Scores()
        else:
            self.scores = Scores.from_dict(self.storage.get_scores())

        self.save()

        return {
            "players": self.get_players(),
            "scores": self.get_scores(),
            "game_mode": self.game_mode,
            "ai_difficulty": self.ai_difficulty,
        }

    def save(self):
        """Write players, scores and mode/difficulty to storage."""
        self.storage.save_players({
            "x": self.players[Player.X].name,
            "o": self.players[Player.O].name,
        })
        self.storage.save_scores(asdict(self.scores))

        # Keep the UI-owned settings (sound, theme) as they are
        settings = self.storage.get_settings()
        settings["game_mode"] = self.game_mode.value
        settings["ai_difficulty"] = self.ai_difficulty.value
        self.storage.save_settings(settings)

    def update_score(self, winner: Optional[str]) -> Scores:
        """
        Count a finished game.

        Args:
            winner: "X", "O", or anything else for a draw.

        Returns:
            Copy of the updated scores.
        """
        if winner == Player.X.value:
            self.scores.x += 1
        elif winner == Player.O.value:
            self.scores.o += 1
        else:
            self.scores.draw += 1

        self.save()
        return self.get_scores()

    def revoke_score(self, winner: Optional[str]) -> Scores:
        """Take back a game counted by ``update_score``, e.g. after an undo."""
        if winner == Player.X.value:
            self.scores.x = max(self.scores.x - 1, 0)
        elif winner == Player.O.value:
            self.scores.o = max(self.scores.o - 1, 0)
        else:
            self.scores.draw = max(self.scores.draw - 1, 0)

        self.save()
        return self.get_scores()

    def reset_scores(self) -> Scores:
        self.scores = Scores()
        self.save()
        return self.get_scores()

    def get_players(self) -> Dict[Player, PlayerInfo]:
        return {mark: PlayerInfo(info.name, info.is_ai) for mark, info in self.players.items()}

    def get_scores(self) -> Scores:
        return Scores(self.scores.x, self.scores.o, self.scores.draw)

    def get_game_mode(self) -> GameMode:
        return self.game_mode

    def set_game_mode(self, mode: Union[str, GameMode]):
        self.game_mode = GameMode.from_value(mode)
        self._apply_game_mode()
        self.save()

    def get_ai_difficulty(self) -> Difficulty:
        return self.ai_difficulty

    def set_ai_difficulty(self, difficulty: Union[str, Difficulty]):
        self.ai_difficulty = Difficulty.from_value(difficulty)
        self.save()

    def get_current_player(self, mark: Union[str, Player]) -> PlayerInfo:
        """The player who plays ``mark``."""
        info = self.players[Player(mark)]
        return PlayerInfo(info.name, info.is_ai)

    def _apply_game_mode(self):
        opponent = self.players[Player.O]
        opponent.is_ai = self.game_mode == GameMode.PVC
        if opponent.is_ai:
            opponent.name = self.storage.config.COMPUTER_NAME
        elif opponent.name == self.storage.config.COMPUTER_NAME:
            opponent.name = self.storage.config.DEFAULT_PLAYER_O
