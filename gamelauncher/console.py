"""Interactive text-menu front end for the launcher."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, Optional, Sequence, TextIO

from .launcher import GameManager, LaunchError
from .models import Game, Settings, default_settings, new_game
from .monitor import SourceMonitor, UpdateCheckError
from .storage import StorageManager

_INT_RE = re.compile(r"[+-]?[0-9]+")

_MENU = (
    "\n=== Game Launcher Console ===",
    "1. List Games",
    "2. Add Game",
    "3. Import Games from Folder",
    "4. Launch Game",
    "5. Edit Game",
    "6. Delete Game",
    "7. Check for Updates",
    "8. Settings",
    "9. Exit",
)

EXIT_CHOICE = 9


def _parse_int(text: str) -> Optional[int]:
    text = text.strip()
    return int(text) if _INT_RE.fullmatch(text) else None


class ConsoleApp:
    """A menu-driven launcher that reads answers line by line."""

    def __init__(
        self,
        storage: Optional[StorageManager] = None,
        game_manager: Optional[GameManager] = None,
        monitor: Optional[SourceMonitor] = None,
        input_func: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.storage = storage if storage is not None else StorageManager()
        self.game_manager = game_manager if game_manager is not None else GameManager()
        self.monitor = monitor if monitor is not None else SourceMonitor()
        self.input_func = input_func if input_func is not None else input
        self.output = output if output is not None else sys.stdout
        self.games: list[Game] = []
        self.settings: Settings = default_settings()

    def _say(self, text: str = "") -> None:
        print(text, file=self.output)

    def _ask(self, prompt: str) -> str:
        self.output.write(prompt)
        self.output.flush()
        return self.input_func()

    def _ask_choice(self, prompt: str) -> int:
        value = _parse_int(self._ask(prompt))
        return 0 if value is None else value

    def _load_data(self) -> None:
        try:
            self.games = self.storage.load_games()
        except (OSError, ValueError) as exc:
            self._say(f"Error loading games: {exc}")
            self.games = []
        try:
            self.settings = self.storage.load_settings()
        except (OSError, ValueError) as exc:
            self._say(f"Error loading settings: {exc}")
            self.settings = default_settings()

    def run(self) -> None:
        """Load the data and serve the menu until exit is chosen or input ends."""
        self._load_data()
        while True:
            for line in _MENU:
                self._say(line)
            try:
                choice = self._ask_choice("Choose an option: ")
                if not self.handle_choice(choice):
                    return
            except EOFError:
                return

    def handle_choice(self, choice: int) -> bool:
        """Carry out a menu choice; return False when the user chose to exit."""
        if choice == EXIT_CHOICE:
            self._say("Goodbye!")
            return False
        actions = {
            1: self.list_games,
            2: self.add_game,
            3: self.import_games,
            4: self.launch_game,
            5: self.edit_game,
            6: self.delete_game,
            7: self.check_updates,
            8: self.show_settings,
        }
        action = actions.get(choice)
        if action is None:
            self._say("Invalid choice. Please try again.")
        else:
            action()
        return True

    def list_games(self) -> None:
        self._say("\n=== Games ===")
        if not self.games:
            self._say("No games found.")
            return
        for number, game in enumerate(self.games, start=1):
            self._say(f"{number}. {game.name}")
            self._say(f"   Executable: {game.executable}")
            if game.current_version:
                self._say(f"   Current Version: {game.current_version}")
            if game.source_url:
                self._say(f"   Source: {game.source_url}")
            if game.version_selector:
                self._say(f"   Version Selector: {game.version_selector}")
            self._say()

    def add_game(self) -> None:
        name = self._ask("Enter game name: ").strip()
        executable = self._ask("Enter executable path: ").strip().strip("\"'")
        source_url = self._ask("Enter source URL (optional): ").strip()

        if not name or not executable:
            self._say("Name and executable are required.")
            return

        game = new_game(name, executable, "")
        game.source_url = source_url
        self.games.append(game)
        self._save_games()
        self._say(f"Game '{name}' added successfully!")

    def import_games(self) -> None:
        folder_path = self._ask("Enter folder path to scan: ").strip().strip("\"'")
        try:
            found = self.game_manager.scan_folder(folder_path)
        except OSError as exc:
            self._say(f"Error scanning folder: {exc}")
            return

        if not found:
            self._say("No executable games found in the folder.")
            return

        self._say(f"Found {len(found)} games:")
        for number, game in enumerate(found, start=1):
            self._say(f"{number}. {game.name} ({game.executable})")

        response = self._ask("Import all games? (y/n): ").strip().lower()
        if response not in ("y", "yes"):
            return

        known = {game.executable for game in self.games}
        for game in found:
            if game.executable not in known:
                self.games.append(game)
                known.add(game.executable)
        self._save_games()
        self._say(f"Imported {len(found)} new games.")

    def _pick_game(self, prompt: str) -> Optional[Game]:
        self.list_games()
        choice = self._ask_choice(prompt)
        if not 1 <= choice <= len(self.games):
            self._say("Invalid game number.")
            return None
        return self.games[choice - 1]

    def launch_game(self) -> None:
        if not self.games:
            self._say("No games available.")
            return
        game = self._pick_game("Enter game number to launch: ")
        if game is None:
            return
        self._say(f"Launching {game.name}...")
        try:
            self.game_manager.launch_game(game)
        except LaunchError as exc:
            self._say(f"Error launching game: {exc}")
        else:
            self._say(f"Game '{game.name}' launched successfully!")

    def edit_game(self) -> None:
        if not self.games:
            self._say("No games available.")
            return
        game = self._pick_game("Enter game number to edit: ")
        if game is None:
            return

        fields = (
            ("name", "name", "New name (press Enter to keep current): "),
            ("executable", "executable", "New executable (press Enter to keep current): "),
            ("source_url", "source URL", "New source URL (press Enter to keep current): "),
            (
                "version_selector",
                "version selector",
                "New version selector (CSS, e.g., .version, #version) "
                "(press Enter to keep current): ",
            ),
            (
                "version_pattern",
                "version pattern",
                r"New version pattern (Regex, e.g., v(\d+\.\d+\.\d+)) "
                "(press Enter to keep current): ",
            ),
            (
                "current_version",
                "version",
                "New current version (press Enter to keep current): ",
            ),
        )
        for attribute, label, prompt in fields:
            self._say(f"Current {label}: {getattr(game, attribute)}")
            value = self._ask(prompt).strip()
            if value:
                setattr(game, attribute, value)

        self._save_games()
        self._say(f"Game '{game.name}' updated successfully!")

    def delete_game(self) -> None:
        if not self.games:
            self._say("No games to delete.")
            return
        self.list_games()
        choice = _parse_int(self._ask("Enter the number of the game to delete: "))
        if choice is None or not 1 <= choice <= len(self.games):
            self._say("Invalid choice.")
            return

        game = self.games[choice - 1]
        confirm = self._ask(
            f"Are you sure you want to delete '{game.name}'? (y/N): "
        ).lower().strip()
        if confirm not in ("y", "yes"):
            self._say("Deletion cancelled.")
            return

        del self.games[choice - 1]
        self._save_games()
        self._say(f"Game '{game.name}' deleted successfully!")

    def check_updates(self) -> None:
        self._say("Checking for updates...")
        updated = 0
        for game in self.games:
            if not game.source_url:
                continue
            self._say(f"Checking {game.name}...")
            try:
                info = self.monitor.check_for_updates(game)
            except UpdateCheckError as exc:
                self._say(f"Error checking {game.name}: {exc}")
                continue
            if info.has_update:
                game.update_info(info.version)
                game.mark_checked()
                self._say(f"Update available for {game.name}: {info.version}")
                updated += 1

        if updated:
            self._save_games()
            self._say(f"Found {updated} updates.")
        else:
            self._say("No updates found.")

    def show_settings(self) -> None:
        self._say("\n=== Settings ===")
        self._say(f"Check interval: {self.settings.check_interval} seconds")
        self._say(f"Notifications: {str(self.settings.notifications).lower()}")

        answer = self._ask(
            "New check interval (seconds, press Enter to keep current): "
        ).strip()
        if answer:
            interval = _parse_int(answer)
            if interval is not None and interval > 0:
                self.settings.check_interval = interval

        answer = self._ask(
            "Enable notifications? (y/n, press Enter to keep current): "
        ).strip().lower()
        if answer in ("y", "yes"):
            self.settings.notifications = True
        elif answer in ("n", "no"):
            self.settings.notifications = False

        self._save_settings()
        self._say("Settings saved.")

    def _save_games(self) -> None:
        try:
            self.storage.save_games(self.games)
        except OSError as exc:
            self._say(f"Error saving games: {exc}")

    def _save_settings(self) -> None:
        try:
            self.storage.save_settings(self.settings)
        except OSError as exc:
            self._say(f"Error saving settings: {exc}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gamelauncher-console",
        description="Manage and launch games from a text menu.",
    )
    parser.parse_args(argv)

    print("Game Launcher Console Version")
    print("=============================")
    ConsoleApp().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())