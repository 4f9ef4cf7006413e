import json

import pytest

from gamelauncher.models import Settings, default_settings, new_game
from gamelauncher.storage import StorageManager, clean_path, default_data_path


def test_clean_path_strips_quotes():
    assert clean_path('"game.exe"') == "game.exe"
    assert clean_path("'game.exe'") == "game.exe"
    assert clean_path("\"'game.exe'\"") == "game.exe"


def test_clean_path_normalises():
    assert clean_path("a/../b") == "b"
    assert clean_path("") == "."


def test_default_data_path_created(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    path = default_data_path()
    assert path == tmp_path / ".gamelauncher"
    assert path.is_dir()


def test_load_games_missing_file(tmp_path):
    assert StorageManager(tmp_path).load_games() == []


def test_games_round_trip(tmp_path):
    storage = StorageManager(tmp_path)
    game = new_game("Test Game", "game.exe", "folder")
    game.source_url = "https://example.com/g"
    storage.save_games([game])
    loaded = storage.load_games()
    assert len(loaded) == 1
    assert loaded[0] == game


def test_saved_games_file_is_json_array(tmp_path):
    storage = StorageManager(tmp_path)
    storage.save_games([new_game("A", "a.exe", "")])
    data = json.loads((tmp_path / "games.json").read_text(encoding="utf-8"))
    assert isinstance(data, list)
    assert data[0]["name"] == "A"
    assert data[0]["is_installed"] is True


def test_load_games_cleans_paths(tmp_path):
    (tmp_path / "games.json").write_text(
        json.dumps([{"name": "Q", "executable": '"game.exe"', "folder": ""}]),
        encoding="utf-8",
    )
    games = StorageManager(tmp_path).load_games()
    assert games[0].executable == "game.exe"
    assert games[0].folder == "."


def test_load_games_null(tmp_path):
    (tmp_path / "games.json").write_text("null", encoding="utf-8")
    assert StorageManager(tmp_path).load_games() == []


def test_load_games_invalid_json(tmp_path):
    (tmp_path / "games.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        StorageManager(tmp_path).load_games()


def test_load_games_wrong_shape(tmp_path):
    (tmp_path / "games.json").write_text('{"name": "x"}', encoding="utf-8")
    with pytest.raises(ValueError):
        StorageManager(tmp_path).load_games()


def test_load_settings_missing_file(tmp_path):
    assert StorageManager(tmp_path).load_settings() == default_settings()


def test_settings_round_trip(tmp_path):
    storage = StorageManager(tmp_path)
    settings = Settings(check_interval=120, notifications=False, theme="dark")
    storage.save_settings(settings)
    assert storage.load_settings() == settings


def test_load_settings_partial(tmp_path):
    (tmp_path / "settings.json").write_text('{"check_interval": 5}', encoding="utf-8")
    settings = StorageManager(tmp_path).load_settings()
    assert settings.check_interval == 5
    assert settings.notifications is False