"""Command that normalises the paths stored for each game."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from .models import Game
from .storage import StorageManager, clean_path


@dataclass(frozen=True)
class PathChange:
    """The paths of one game before and after cleaning."""

    number: int
    name: str
    old_executable: str
    new_executable: str
    old_folder: str
    new_folder: str

    @property
    def executable_changed(self) -> bool:
        return self.old_executable != self.new_executable

    @property
    def folder_changed(self) -> bool:
        return self.old_folder != self.new_folder


def fix_game_paths(games: Sequence[Game]) -> list[PathChange]:
    """Clean every game's paths in place and report the games that changed."""
    changes = []
    for number, game in enumerate(games, start=1):
        old_executable, old_folder = game.executable, game.folder
        game.executable = clean_path(game.executable)
        game.folder = clean_path(game.folder)
        change = PathChange(
            number, game.name, old_executable, game.executable, old_folder, game.folder
        )
        if change.executable_changed or change.folder_changed:
            changes.append(change)
    return changes


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gamelauncher-fix-paths",
        description="Normalise the executable and folder paths of stored games.",
    )
    parser.parse_args(argv)

    print("Game Launcher - Path Fixer")
    print("==========================")

    storage = StorageManager()
    try:
        games = storage.load_games()
    except (OSError, ValueError) as exc:
        print(f"Error loading games: {exc}")
        return 1

    if not games:
        print("No games found to fix.")
        return 0

    print(f"Found {len(games)} games to check...")

    changes = fix_game_paths(games)
    for change in changes:
        print(f"Game {change.number}: {change.name}")
        if change.executable_changed:
            print(f"  Executable: {change.old_executable} -> {change.new_executable}")
        if change.folder_changed:
            print(f"  Folder: {change.old_folder} -> {change.new_folder}")

    if not changes:
        print("No path issues found.")
        return 0

    try:
        storage.save_games(games)
    except OSError as exc:
        print(f"Error saving fixed games: {exc}")
        return 1
    print(f"\nFixed {len(changes)} games with path issues.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())