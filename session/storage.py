"""
Storage for TicTacToe.
Saves and loads players, scores, settings and the game in progress
as small JSON files.
"""

import json
from typing import Any, Dict, Optional

from .config import SessionConfig


class GameStorage:
    """
    Key/value storage backed by one JSON file per key.

    Missing or unreadable files are treated as absent and the getters
    return the defaults instead.
    """

    def __init__(self, config: Optional[SessionConfig] = None):
        self.config = config if config is not None else SessionConfig()

    # ==================== PLAYERS ====================

    def save_players(self, players: Dict[str, str]):
        """Save player names, keyed "x" and "o"."""
        self._write(self.config.PLAYERS_FILE, players)

    def get_players(self) -> Dict[str, str]:
        players = self._read(self.config.PLAYERS_FILE)
        if not isinstance(players, dict):
            return {"x": self.config.DEFAULT_PLAYER_X, "o": self.config.DEFAULT_PLAYER_O}
        return players

    # ==================== SCORES ====================

    def save_scores(self, scores: Dict[str, int]):
        self._write(self.config.SCORES_FILE, scores)

    def get_scores(self) -> Dict[str, int]:
        scores = self._read(self.config.SCORES_FILE)
        if not isinstance(scores, dict):
            return {"x": 0, "o": 0, "draw": 0}
        return scores

    # ==================== SETTINGS ====================

    def save_settings(self, settings: Dict[str, Any]):
        self._write(self.config.SETTINGS_FILE, settings)

    def get_settings(self) -> Dict[str, Any]:
        settings = self._read(self.config.SETTINGS_FILE)
        if not isinstance(settings, dict):
            return {
                "game_mode": self.config.DEFAULT_GAME_MODE,
                "ai_difficulty": self.config.DEFAULT_DIFFICULTY,
                "sound_enabled": self.config.DEFAULT_SOUND_ENABLED,
                "dark_mode": self.config.DEFAULT_DARK_MODE,
            }
        return settings

    # ==================== GAME IN PROGRESS ====================

    def save_game_state(self, game_state: Dict[str, Any]):
        self._write(self.config.GAME_STATE_FILE, game_state)

    def get_game_state(self) -> Optional[Dict[str, Any]]:
        """The saved game, or None if there isn't one."""
        game_state = self._read(self.config.GAME_STATE_FILE)
        return game_state if isinstance(game_state, dict) else None

    def clear_game_state(self):
        self._remove(self.config.GAME_STATE_FILE)

    def reset_all(self):
        """Forget players, scores and the saved game. Settings are kept."""
        self._remove(self.config.PLAYERS_FILE)
        self._remove(self.config.SCORES_FILE)
        self._remove(self.config.GAME_STATE_FILE)

    # ==================== FILE ACCESS ====================

    def _read(self, filename: str) -> Any:
        path = self.config.path_for(filename)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Warning: could not read {path}: {e}")
            return None

    def _write(self, filename: str, data: Any):
        path = self.config.path_for(filename)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            print(f"Warning: could not save {path}: {e}")

    def _remove(self, filename: str):
        path = self.config.path_for(filename)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            print(f"Warning: could not remove {path}: {e}")
