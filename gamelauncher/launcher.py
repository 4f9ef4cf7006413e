"""Finding and starting game executables."""

from __future__ import annotations

import os
import stat
import subprocess
import sys
from typing import Iterator

from .models import Game, new_game


class LaunchError(Exception):
    """A game could not be started."""


def clean_path(path: str) -> str:
    """Strip surrounding quotes, normalise, and make the path absolute."""
    path = os.path.normpath(path.strip("\"'"))
    if not os.path.isabs(path):
        path = os.path.abspath(path)
    return path


def _extension(path: str) -> str:
    base = os.path.basename(path)
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def is_executable(path: str) -> bool:
    """Judge by file extension whether a path looks runnable on this platform."""
    ext = _extension(path).lower()
    if sys.platform == "win32":
        return ext in (".exe", ".bat", ".cmd")
    if sys.platform == "darwin":
        return ext in (".app", "")
    return ext in ("", ".sh")


def create_game_from_path(path: str) -> Game:
    """Make a game named after the folder that holds the executable."""
    executable = clean_path(path)
    folder = os.path.dirname(executable)
    name = os.path.basename(folder).strip()
    if not name:
        name = os.path.basename(executable)
    ext = _extension(name)
    if ext:
        name = name[: -len(ext)]
    return new_game(name, executable, folder)


def _walk_files(root: str) -> Iterator[str]:
    """Yield non-directory paths under root in lexical order, not following links."""
    info = os.lstat(root)
    if not stat.S_ISDIR(info.st_mode):
        yield root
        return
    for name in sorted(os.listdir(root)):
        yield from _walk_files(os.path.join(root, name))


class GameManager:
    """Launches games and scans folders for them."""

    def launch_game(self, game: Game) -> subprocess.Popen:
        """Start the game's executable and return the running process."""
        if not game.is_installed:
            raise LaunchError("game is not installed")
        executable = clean_path(game.executable)
        if not os.path.exists(executable):
            raise LaunchError(f"executable not found: {executable}")
        cwd = clean_path(game.folder) if game.folder else None
        try:
            return subprocess.Popen([executable], cwd=cwd)
        except OSError as exc:
            raise LaunchError(str(exc)) from exc

    def scan_folder(self, folder_path: str) -> list[Game]:
        """Return a game for every executable found under the folder."""
        return [
            create_game_from_path(path)
            for path in _walk_files(folder_path)
            if is_executable(path)
        ]

    def find_executables(self, folder_path: str) -> list[str]:
        """Return the paths of every executable found under the folder."""
        return [path for path in _walk_files(folder_path) if is_executable(path)]