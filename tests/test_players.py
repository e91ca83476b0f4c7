import pytest

from engine.ai_player import Difficulty
from engine.game_state import Player
from session.players import GameMode, PlayerRegistry, Scores


@pytest.fixture
def registry(storage):
    return PlayerRegistry(storage)


def test_initialize_defaults(registry):
    summary = registry.initialize()
    assert summary["players"][Player.X].name == "Player X"
    assert summary["players"][Player.O].name == "Player O"
    assert summary["game_mode"] == GameMode.PVP
    assert summary["ai_difficulty"] == Difficulty.EASY
    assert summary["scores"] == Scores()


def test_vs_computer_renames_o(registry):
    registry.initialize(player1_name="Ada", player2_name="Grace", game_mode="pvc")
    players = registry.get_players()
    assert players[Player.X].name == "Ada"
    assert not players[Player.X].is_ai
    assert players[Player.O].name == "Computer"
    assert players[Player.O].is_ai


def test_switching_back_to_pvp(registry):
    registry.initialize(game_mode="pvc")
    registry.set_game_mode(GameMode.PVP)
    o = registry.get_current_player("O")
    assert not o.is_ai
    assert o.name == "Player O"


def test_update_score(registry):
    registry.initialize()
    registry.update_score("X")
    registry.update_score("X")
    registry.update_score("O")
    scores = registry.update_score(None)
    assert scores == Scores(x=2, o=1, draw=1)


def test_returned_scores_are_copies(registry):
    registry.initialize()
    scores = registry.get_scores()
    scores.x = 99
    assert registry.get_scores().x == 0


def test_saved_values_are_picked_up(storage, registry):
    registry.initialize(player1_name="Ada", game_mode="pvc", ai_difficulty="hard")
    registry.update_score("O")

    again = PlayerRegistry(storage)
    again.initialize()
    assert again.get_current_player(Player.X).name == "Ada"
    assert again.get_game_mode() == GameMode.PVC
    assert again.get_ai_difficulty() == Difficulty.HARD
    assert again.get_scores().o == 1


def test_reset_scores_on_initialize(storage, registry):
    registry.initialize()
    registry.update_score("X")
    again = PlayerRegistry(storage)
    again.initialize(reset_scores=True)
    assert again.get_scores() == Scores()


def test_settings_owned_by_ui_are_kept(storage, registry):
    settings = storage.get_settings()
    settings["dark_mode"] = True
    storage.save_settings(settings)

    registry.initialize()
    registry.set_ai_difficulty("medium")

    saved = storage.get_settings()
    assert saved["dark_mode"] is True
    assert saved["ai_difficulty"] == "medium"


def test_unknown_values_fall_back(registry):
    registry.initialize(game_mode="online", ai_difficulty="godlike")
    assert registry.get_game_mode() == GameMode.PVP
    assert registry.get_ai_difficulty() == Difficulty.EASY


def test_scores_from_bad_data():
    assert Scores.from_dict({"x": -3, "o": "two", "draw": 4}) == Scores(0, 0, 4)
    assert Scores.from_dict({"x": True, "o": False, "draw": 2}) == Scores(0, 0, 2)


def test_revoke_score(storage, registry):
    registry.initialize()
    registry.update_score("X")
    registry.update_score(None)

    assert registry.revoke_score("X") == Scores(draw=1)
    assert registry.revoke_score(None) == Scores()
    # Never goes below zero
    assert registry.revoke_score("O") == Scores()
    assert storage.get_scores() == {"x": 0, "o": 0, "draw": 0}
