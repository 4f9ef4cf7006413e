"""Command-line entry point: list or launch stored games, or open the menu."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence, TextIO

from .console import ConsoleApp
from .launcher import GameManager, LaunchError
from .models import Game
from .storage import StorageManager

_INT_RE = re.compile(r"[+-]?[0-9]+")


def usage() -> str:
    """Return the command-line help text."""
    return "\n".join(
        [
            "Game Launcher - Command Line Usage",
            "==================================",
            "",
            "Interactive mode (default):",
            "  gamelauncher",
            "",
            "Command Line Options:",
            "  -game <number>     Launch game by number",
            "  -list              List all available games",
            "  -help              Show this help message",
            "",
            "Examples:",
            "  gamelauncher -game 1    # Launch the first game",
            "  gamelauncher -list      # List all games",
            "  gamelauncher -help      # Show help",
        ]
    )


def _out(out: Optional[TextIO]) -> TextIO:
    return out if out is not None else sys.stdout


def list_games(
    storage: Optional[StorageManager] = None, out: Optional[TextIO] = None
) -> list[Game]:
    """Print the stored games and return them."""
    storage = storage if storage is not None else StorageManager()
    out = _out(out)
    try:
        games = storage.load_games()
    except (OSError, ValueError) as exc:
        print(f"Error loading games: {exc}", file=out)
        return []
    if not games:
        print("No games found.", file=out)
        return []

    print("Available games:", file=out)
    print("================", file=out)
    for number, game in enumerate(games, start=1):
        print(f"{number}. {game.name}", file=out)
        print(f"   Executable: {game.executable}", file=out)
        if game.current_version:
            print(f"   Version: {game.current_version}", file=out)
        print(file=out)
    return games


def launch_game_by_number(
    storage: Optional[StorageManager] = None,
    game_manager: Optional[GameManager] = None,
    game_number: str = "",
    out: Optional[TextIO] = None,
) -> bool:
    """Launch the game at a one-based position in the list; True if it started."""
    storage = storage if storage is not None else StorageManager()
    game_manager = game_manager if game_manager is not None else GameManager()
    out = _out(out)
    try:
        games = storage.load_games()
    except (OSError, ValueError) as exc:
        print(f"Error loading games: {exc}", file=out)
        return False
    if not games:
        print("No games found.", file=out)
        return False

    text = game_number.strip()
    if not _INT_RE.fullmatch(text):
        print(f"Invalid game number: {game_number}", file=out)
        return False
    number = int(text)
    if not 1 <= number <= len(games):
        print(f"Game number {number} not found. Available games:", file=out)
        list_games(storage, out)
        return False

    game = games[number - 1]
    print(f"Launching {game.name}...", file=out)
    try:
        game_manager.launch_game(game)
    except LaunchError as exc:
        print(f"Error launching game: {exc}", file=out)
        return False
    print(f"Successfully launched {game.name}", file=out)
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        ConsoleApp().run()
        return 0

    option = args[0]
    if option in ("-game", "--game"):
        if len(args) < 2:
            print("Error: Game number required")
            print(usage())
            return 1
        return 0 if launch_game_by_number(game_number=args[1]) else 1
    if option in ("-list", "--list"):
        list_games()
        return 0
    if option in ("-help", "--help", "-h", "--h"):
        print(usage())
        return 0
    print(f"Unknown option: {option}")
    print(usage())
    return 1


if __name__ == "__main__":
    raise SystemExit(main())