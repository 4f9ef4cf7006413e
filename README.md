# gamelauncher

A small launcher for games installed on your machine. It keeps a list of your
games, starts them from the command line or an interactive text menu, and
checks each game's download page for a newer version.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Where data is kept

The game list and settings are stored as JSON in `~/.gamelauncher/`
(`games.json` and `settings.json`). If that directory cannot be created, the
current directory is used instead. A missing `games.json` means an empty list;
a missing `settings.json` means the default settings (check interval 3600
seconds, notifications on, theme `light`). When the game list is loaded, the
stored executable and folder paths have surrounding quotes stripped and are
normalised.

## Command line

```
gamelauncher                # open the interactive menu
gamelauncher -list          # list all games with their numbers
gamelauncher -game 1        # launch the first game in the list
gamelauncher -help          # show usage
```

Double-dash forms (`--list`, `--game`, `--help`, `--h`) and `-h` work too. An
unknown option prints the usage and exits with status 1, as does `-game`
without a number or a launch that fails.

## Interactive menu

```
gamelauncher-console
```

The menu lets you:

1. List games
2. Add a game by hand (name, executable, optional source URL)
3. Import games by scanning a folder for executables
4. Launch a game
5. Edit a game: name, executable, source URL, version selector, version
   pattern and current version (press Enter to keep a value)
6. Delete a game (after confirmation)
7. Check all games with a source URL for updates
8. Change settings (check interval in seconds, notifications)
9. Exit

The menu also ends when input runs out.

## Finding and launching games

Scanning a folder walks it recursively and treats a file as a game by its
extension: `.exe`, `.bat` or `.cmd` on Windows; `.app` or no extension on
macOS; `.sh` or no extension elsewhere. Each game is named after the folder
that holds its executable, and that folder is its working directory. On import,
games whose executable is already in the list are not added again.

A game is launched only if it is marked installed and its executable exists;
otherwise `gamelauncher.launcher.LaunchError` is raised. Launching starts the
executable and does not wait for it.

## Update checking

Each game may have a source URL (`gamelauncher.monitor.SourceMonitor`):

- A GitHub URL is turned into the repository's latest-release API address.
  The check reports the version `latest`, and reports an update when the game
  has no recorded version yet or the fetched page's title contains "latest".
- An f95zone thread is searched for "Version: x.y.z"-style text and
  `v1.2.3`-style markers.
- Any other page is searched with the game's **version selector** (a CSS
  selector such as `.version` or `#version`) and, optionally, its **version
  pattern** (a regular expression whose first group is the version, for
  example `v(\d+\.\d+\.\d+)`).

If nothing is found this way and the game has no current version yet, the page
is searched for any heading or version-named element that looks like a
version, and what is found becomes the game's current version. A check reports
an update when the version found differs from the current version. When the
menu finds an update it records the found version as the game's `version` and
saves the list.

`gamelauncher.versioning` compares version strings part by part
(`is_version_newer`) and describes a fetched version for display
(`fetched_status`), marking it `[NEW]` or `[DIFF]`.

## Repairing stored paths

```
gamelauncher-fix-paths
```

Strips surrounding quotes from and normalises the executable and folder paths
in the stored game list, prints every change, and saves the list only when
something changed.

## What it does not do

There is no graphical window. `gamelauncher.library.GameLibrary` holds the
operations such a window would offer (import, add, delete, check all updates,
update settings), and `gamelauncher.versioning` the labels and colours for a
fetched version, but nothing draws them. Nothing checks for updates on a
timer either: the check interval is stored in the settings, but checks run
only when asked for.