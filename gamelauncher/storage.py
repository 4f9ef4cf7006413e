"""Persistence of games and settings as JSON files."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable, Optional, Union

from .models import Game, Settings, default_settings

GAMES_FILE = "games.json"
SETTINGS_FILE = "settings.json"


def default_data_path() -> Path:
    """Return ~/.gamelauncher, creating it; fall back to the current directory."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        home = Path(".")
    data_path = home / ".gamelauncher"
    try:
        data_path.mkdir(parents=True, exist_ok=True)
    except OSError:
        return Path(".")
    return data_path


def clean_path(path: str) -> str:
    """Strip surrounding quotes and normalise separators."""
    return os.path.normpath(path.strip("\"'"))


class StorageManager:
    """Reads and writes the launcher's data files."""

    def __init__(self, data_path: Optional[Union[str, os.PathLike]] = None) -> None:
        self.data_path = Path(data_path) if data_path is not None else default_data_path()

    @property
    def games_file(self) -> Path:
        return self.data_path / GAMES_FILE

    @property
    def settings_file(self) -> Path:
        return self.data_path / SETTINGS_FILE

    def save_games(self, games: Iterable[Game]) -> None:
        data = [game.to_dict() for game in games]
        self.games_file.write_text(
            json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
        )

    def load_games(self) -> list[Game]:
        """Load games, cleaning their paths; a missing file means no games."""
        try:
            text = self.games_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        data = json.loads(text)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError(f"{self.games_file} does not hold a JSON array")
        games = [Game.from_dict(item) for item in data]
        for game in games:
            game.executable = clean_path(game.executable)
            game.folder = clean_path(game.folder)
        return games

    def save_settings(self, settings: Settings) -> None:
        self.settings_file.write_text(
            json.dumps(settings.to_dict(), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    def load_settings(self) -> Settings:
        """Load settings; a missing file means the defaults."""
        try:
            text = self.settings_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            return default_settings()
        data = json.loads(text)
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"{self.settings_file} does not hold a JSON object")
        return Settings.from_dict(data)