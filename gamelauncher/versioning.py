"""Comparing version strings and describing a fetched version for display."""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
SAME_BACKGROUND: Color = (0, 255, 0, 100)
NEWER_BACKGROUND: Color = (255, 0, 0, 100)
DIFFERENT_BACKGROUND: Color = (255, 165, 0, 100)

FETCHED_TEXT_LIMIT = 20
CURRENT_TEXT_LIMIT = 15

_MAX_INT = 2**63 - 1
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class FetchedStatus:
    """How a fetched version is shown: its text and colours."""

    text: str
    background: Color = WHITE
    foreground: Color = BLACK


CHECKING = FetchedStatus("Checking...")
NO_SOURCE = FetchedStatus("No source")
CHECK_ERROR = FetchedStatus("Error")
NOT_FOUND = FetchedStatus("Not found")


def truncate_text(text: str, max_length: int) -> str:
    """Shorten text to max_length characters, ending it with '...' if cut."""
    if len(text) <= max_length:
        return text
    if max_length < 3:
        raise ValueError(f"cannot truncate to fewer than 3 characters: {max_length}")
    return text[: max_length - 3] + "..."


def parse_version_part(part: str) -> int:
    """Read the ASCII digits of one version component as a number; 0 if none."""
    digits = "".join(char for char in part if char in _DIGITS)
    if not digits:
        return 0
    number = int(digits)
    return number if number <= _MAX_INT else 0


def compare_semantic_versions(v1: str, v2: str) -> bool:
    """Tell whether v1 is greater than v2, comparing dot-separated parts numerically."""
    parts1 = v1.split(".")
    parts2 = v2.split(".")
    width = max(len(parts1), len(parts2))
    parts1 += [""] * (width - len(parts1))
    parts2 += [""] * (width - len(parts2))
    for part1, part2 in zip(parts1, parts2):
        num1 = parse_version_part(part1)
        num2 = parse_version_part(part2)
        if num1 != num2:
            return num1 > num2
    return False


def is_version_newer(version1: str, version2: str) -> bool:
    """Tell whether version1 is newer than version2.

    Numeric part comparison is tried first; failing that, the plain string
    ordering decides.
    """
    v1 = version1.strip()
    v2 = version2.strip()
    if not v1 or not v2 or v1 == v2:
        return False
    if compare_semantic_versions(v1, v2):
        return True
    return v1 > v2


def fetched_status(current_version: str, fetched_version: str) -> FetchedStatus:
    """Describe a fetched version relative to the current one."""
    if not fetched_version:
        return NOT_FOUND
    if fetched_version == current_version:
        text, background, foreground = fetched_version, SAME_BACKGROUND, BLACK
    elif is_version_newer(fetched_version, current_version):
        text, background, foreground = fetched_version + " [NEW]", NEWER_BACKGROUND, WHITE
    else:
        text, background, foreground = (
            fetched_version + " [DIFF]",
            DIFFERENT_BACKGROUND,
            BLACK,
        )
    return FetchedStatus(truncate_text(text, FETCHED_TEXT_LIMIT), background, foreground)