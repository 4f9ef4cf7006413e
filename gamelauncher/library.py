"""The launcher's list of games and settings, with the operations the window offers."""

from __future__ import annotations

import re
from typing import Optional

from .launcher import GameManager
from .models import Game, Settings, default_settings, new_game
from .monitor import SourceMonitor, UpdateCheckError, UpdateInfo
from .storage import StorageManager

DEFAULT_CHECK_INTERVAL = 3600

_INTERVAL_RE = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def parse_check_interval(text: str) -> int:
    """Read a leading integer from the text; the default interval if there is none."""
    match = _INTERVAL_RE.match(text)
    if match is None:
        return DEFAULT_CHECK_INTERVAL
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return DEFAULT_CHECK_INTERVAL
    return value


class GameLibrary:
    """Games and settings held in memory and kept in step with storage."""

    def __init__(
        self,
        storage: Optional[StorageManager] = None,
        game_manager: Optional[GameManager] = None,
        monitor: Optional[SourceMonitor] = None,
    ) -> None:
        self.storage = storage if storage is not None else StorageManager()
        self.game_manager = game_manager if game_manager is not None else GameManager()
        self.monitor = monitor if monitor is not None else SourceMonitor()
        self.games: list[Game] = []
        self.settings: Settings = default_settings()

    def load(self) -> list[Exception]:
        """Load games and settings, falling back to empty or default values.

        Returns the errors met while loading, so the caller can report them.
        """
        errors: list[Exception] = []
        try:
            self.games = self.storage.load_games()
        except (OSError, ValueError) as exc:
            errors.append(exc)
            self.games = []
        try:
            self.settings = self.storage.load_settings()
        except (OSError, ValueError) as exc:
            errors.append(exc)
            self.settings = default_settings()
        return errors

    def import_games(self, folder_path: str) -> list[Game]:
        """Scan a folder and add the games not already known by executable.

        Returns every game the scan found; nothing is saved if it found none.
        """
        found = self.game_manager.scan_folder(folder_path)
        if not found:
            return found
        known = {game.executable for game in self.games}
        for game in found:
            if game.executable not in known:
                self.games.append(game)
                known.add(game.executable)
        self.save_games()
        return found

    def add_game(self, name: str, executable: str, source_url: str = "") -> Game:
        """Add a game by hand and save the list."""
        if not name or not executable:
            raise ValueError("name and executable are required")
        game = new_game(name, executable, "")
        game.source_url = source_url
        self.games.append(game)
        self.save_games()
        return game

    def delete_game(self, index: int) -> Game:
        """Remove the game at a zero-based position and save the list."""
        if not 0 <= index < len(self.games):
            raise IndexError(f"no game at position {index}")
        game = self.games.pop(index)
        self.save_games()
        return game

    def check_all_updates(self) -> list[tuple[Game, UpdateInfo]]:
        """Check every game with a source URL and record the updates found.

        Games whose check fails are passed over. The list is saved afterwards.
        """
        updates: list[tuple[Game, UpdateInfo]] = []
        for game in self.games:
            if not game.source_url:
                continue
            try:
                info = self.monitor.check_for_updates(game)
            except UpdateCheckError:
                continue
            if info.has_update:
                game.update_info(info.version)
                game.mark_checked()
                updates.append((game, info))
        self.save_games()
        return updates

    def update_settings(self, interval_text: str, notifications: bool) -> Settings:
        """Apply the settings form's values and save them."""
        self.settings.check_interval = parse_check_interval(interval_text)
        self.settings.notifications = notifications
        self.save_settings()
        return self.settings

    def save_games(self) -> None:
        self.storage.save_games(self.games)

    def save_settings(self) -> None:
        self.storage.save_settings(self.settings)