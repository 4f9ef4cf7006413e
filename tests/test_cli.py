import io

import pytest

from gamelauncher.cli import launch_game_by_number, list_games, main, usage
from gamelauncher.launcher import GameManager
from gamelauncher.models import new_game
from gamelauncher.storage import StorageManager, clean_path


def _storage_with(tmp_path, *games):
    storage = StorageManager(tmp_path)
    storage.save_games(list(games))
    return storage


def test_usage_lists_options():
    text = usage()
    assert "  -game <number>     Launch game by number" in text
    assert "  -list              List all available games" in text


def test_list_games_prints_entries(tmp_path):
    game = new_game("Alpha", "/a/run", "/a")
    game.current_version = "1.0"
    storage = _storage_with(tmp_path, game)
    out = io.StringIO()
    games = list_games(storage, out)
    text = out.getvalue()
    assert [g.name for g in games] == ["Alpha"]
    assert "Available games:" in text
    assert "1. Alpha" in text
    assert f"   Executable: {clean_path('/a/run')}" in text
    assert "   Version: 1.0" in text


def test_list_games_empty(tmp_path):
    out = io.StringIO()
    assert list_games(StorageManager(tmp_path), out) == []
    assert "No games found." in out.getvalue()


def test_list_games_reports_bad_file(tmp_path):
    (tmp_path / "games.json").write_text("{not json", encoding="utf-8")
    out = io.StringIO()
    assert list_games(StorageManager(tmp_path), out) == []
    assert "Error loading games:" in out.getvalue()


def test_launch_rejects_non_number(tmp_path):
    storage = _storage_with(tmp_path, new_game("Alpha", "/a/run", ""))
    out = io.StringIO()
    assert launch_game_by_number(storage, GameManager(), "abc", out) is False
    assert "Invalid game number: abc" in out.getvalue()


def test_launch_out_of_range_lists_games(tmp_path):
    storage = _storage_with(tmp_path, new_game("Alpha", "/a/run", ""))
    out = io.StringIO()
    assert launch_game_by_number(storage, GameManager(), "5", out) is False
    text = out.getvalue()
    assert "Game number 5 not found. Available games:" in text
    assert "1. Alpha" in text


def test_launch_without_games(tmp_path):
    out = io.StringIO()
    assert launch_game_by_number(StorageManager(tmp_path), GameManager(), "1", out) is False
    assert "No games found." in out.getvalue()


def test_launch_not_installed(tmp_path):
    game = new_game("Alpha", "/a/run", "")
    game.is_installed = False
    storage = _storage_with(tmp_path, game)
    out = io.StringIO()
    assert launch_game_by_number(storage, GameManager(), "1", out) is False
    text = out.getvalue()
    assert "Launching Alpha..." in text
    assert "Error launching game: game is not installed" in text


@pytest.mark.parametrize("option", ["-help", "--help", "-h", "--h"])
def test_main_help(option, capsys):
    assert main([option]) == 0
    assert "Command Line Options:" in capsys.readouterr().out


def test_main_unknown_option(capsys):
    assert main(["-bogus"]) == 1
    text = capsys.readouterr().out
    assert "Unknown option: -bogus" in text
    assert "Command Line Options:" in text


def test_main_game_requires_number(capsys):
    assert main(["-game"]) == 1
    assert "Error: Game number required" in capsys.readouterr().out


def test_main_list_uses_home_data(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    data_dir = tmp_path / ".gamelauncher"
    data_dir.mkdir()
    StorageManager(data_dir).save_games([new_game("Alpha", "/a/run", "")])
    assert main(["--list"]) == 0
    text = capsys.readouterr().out
    assert "Available games:" in text
    assert "1. Alpha" in text