from session.config import SessionConfig
from session.storage import GameStorage


def test_defaults_when_nothing_saved(storage):
    assert storage.get_players() == {"x": "Player X", "o": "Player O"}
    assert storage.get_scores() == {"x": 0, "o": 0, "draw": 0}
    assert storage.get_settings() == {
        "game_mode": "pvp",
        "ai_difficulty": "easy",
        "sound_enabled": True,
        "dark_mode": False,
    }
    assert storage.get_game_state() is None


def test_values_round_trip(storage):
    storage.save_players({"x": "Ada", "o": "Grace"})
    storage.save_scores({"x": 3, "o": 1, "draw": 2})
    storage.save_game_state({"board": {"board": ["X"] + [""] * 8}})

    assert storage.get_players() == {"x": "Ada", "o": "Grace"}
    assert storage.get_scores() == {"x": 3, "o": 1, "draw": 2}
    assert storage.get_game_state() == {"board": {"board": ["X"] + [""] * 8}}


def test_values_survive_a_new_instance(storage):
    storage.save_scores({"x": 5, "o": 0, "draw": 0})
    again = GameStorage(SessionConfig(data_dir=storage.config.DATA_DIR))
    assert again.get_scores()["x"] == 5


def test_corrupt_file_reads_as_default(storage, capsys):
    path = storage.config.path_for(storage.config.SCORES_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{not json", encoding="utf-8")

    assert storage.get_scores() == {"x": 0, "o": 0, "draw": 0}
    assert "could not read" in capsys.readouterr().out


def test_clear_game_state(storage):
    storage.save_game_state({"board": {}})
    storage.clear_game_state()
    assert storage.get_game_state() is None
    # Clearing twice is fine
    storage.clear_game_state()


def test_reset_all_keeps_settings(storage):
    storage.save_players({"x": "Ada", "o": "Grace"})
    storage.save_scores({"x": 1, "o": 1, "draw": 1})
    storage.save_settings({"game_mode": "pvc", "ai_difficulty": "hard",
                           "sound_enabled": False, "dark_mode": True})
    storage.save_game_state({"board": {}})

    storage.reset_all()

    assert storage.get_players() == {"x": "Player X", "o": "Player O"}
    assert storage.get_scores() == {"x": 0, "o": 0, "draw": 0}
    assert storage.get_game_state() is None
    assert storage.get_settings()["ai_difficulty"] == "hard"
