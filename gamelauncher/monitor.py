"""Checking a game's source page for newer versions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

import requests
from bs4 import BeautifulSoup

from .models import Game

DEFAULT_TIMEOUT = 30.0

# Matched as plain substrings of the lower-cased text, not as regular expressions.
_VERSION_MARKERS = (
    r"v\d+\.\d+",
    r"\d+\.\d+\.\d+",
    r"version \d+",
)

_F95ZONE_SELECTORS = (
    "strong:-soup-contains('Version')",
    "b:-soup-contains('Version')",
    "[class*='version']",
    "[id*='version']",
    ".message",
    "#message-1",
)

_F95ZONE_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"version[:\s]*([0-9]+\.[0-9]+\.[0-9]+\.[0-9]+)",
        r"version[:\s]*([0-9]+\.[0-9]+\.[0-9]+)",
        r"version[:\s]*([0-9]+\.[0-9]+)",
        r"v([0-9]+\.[0-9]+\.[0-9]+\.[0-9]+)",
        r"v([0-9]+\.[0-9]+\.[0-9]+)",
    )
)

_PAGE_SELECTORS = (
    "[class*='version']",
    "[id*='version']",
    ".version",
    "#version",
    "h1",
    "h2",
    "h3",
)


class UpdateCheckError(Exception):
    """A game's source could not be checked."""


@dataclass
class UpdateInfo:
    """What a check of a game's source found."""

    has_update: bool
    version: str
    url: str
    release_date: datetime = field(default_factory=lambda: datetime.now().astimezone())
    description: str = ""


def _select(soup: BeautifulSoup, selector: str) -> list:
    """Return the elements matching a CSS selector; an invalid selector matches nothing."""
    try:
        return soup.select(selector)
    except Exception:  # the selector engine raises its own syntax error type
        return []


def is_version_string(text: str) -> bool:
    """Tell whether the text contains one of the version markers."""
    lowered = text.lower()
    return any(marker in lowered for marker in _VERSION_MARKERS)


def extract_version_with_config(soup: BeautifulSoup, game: Game) -> str:
    """Find a version using the game's own CSS selector and regex pattern."""
    if not game.version_selector:
        return ""
    pattern: Optional[re.Pattern] = None
    if game.version_pattern:
        try:
            pattern = re.compile(game.version_pattern)
        except re.error:
            pattern = None
    for element in _select(soup, game.version_selector):
        text = element.get_text().strip()
        if pattern is not None:
            match = pattern.search(text)
            if match is not None and pattern.groups >= 1:
                found = match.group(1) or ""
                if found:
                    return found
                continue
        if is_version_string(text):
            return text
    return ""


def extract_f95zone_version(soup: BeautifulSoup) -> str:
    """Find a version in an F95zone game thread."""
    for selector in _F95ZONE_SELECTORS:
        for element in _select(soup, selector):
            text = element.get_text()
            for pattern in _F95ZONE_PATTERNS:
                match = pattern.search(text)
                if match is not None:
                    return match.group(1)
    return ""


def extract_version_from_page(soup: BeautifulSoup) -> str:
    """Find any element on the page whose text looks like a version."""
    for selector in _PAGE_SELECTORS:
        for element in _select(soup, selector):
            text = element.get_text().strip()
            if is_version_string(text):
                return text
    return ""


class SourceMonitor:
    """Checks games' source URLs for updates."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def check_for_updates(self, game: Game) -> UpdateInfo:
        """Check the game's source and report whether an update is available."""
        if not game.source_url:
            raise UpdateCheckError("no source URL configured")
        if "github.com" in game.source_url:
            return self._check_github_releases(game)
        if "f95zone.to" in game.source_url:
            return self._check_f95zone_source(game)
        return self._check_generic_source(game)

    def _fetch(self, url: str, what: str) -> BeautifulSoup:
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise UpdateCheckError(str(exc)) from exc
        with response:
            if response.status_code != 200:
                raise UpdateCheckError(f"{what} returned status {response.status_code}")
            return BeautifulSoup(response.text, "html.parser")

    def _check_github_releases(self, game: Game) -> UpdateInfo:
        url = game.source_url
        if url.endswith("/"):
            url = url[:-1]
        parts = url.split("/")
        if len(parts) < 5:
            raise UpdateCheckError("invalid GitHub URL")
        owner, repo = parts[-2], parts[-1]
        api_url = f"https://api.github.com/repos/{owner}/{repo}/releases/latest"

        soup = self._fetch(api_url, "GitHub API")
        title = soup.find("title")
        title_text = title.get_text() if title is not None else ""
        has_update = game.version == "" or "latest" in title_text

        return UpdateInfo(
            has_update=has_update,
            version="latest",
            url=api_url,
            description="Latest release available",
        )

    def _check_f95zone_source(self, game: Game) -> UpdateInfo:
        soup = self._fetch(game.source_url, "F95zone")
        version = extract_f95zone_version(soup)
        version = self._first_check_fallback(soup, game, version)
        return UpdateInfo(
            has_update=bool(version) and version != game.current_version,
            version=version,
            url=game.source_url,
            description=f"F95zone - Current: {game.current_version}, Found: {version}",
        )

    def _check_generic_source(self, game: Game) -> UpdateInfo:
        soup = self._fetch(game.source_url, "source")
        version = extract_version_with_config(soup, game)
        version = self._first_check_fallback(soup, game, version)
        return UpdateInfo(
            has_update=bool(version) and version != game.current_version,
            version=version,
            url=game.source_url,
            description=f"Current: {game.current_version}, Found: {version}",
        )

    @staticmethod
    def _first_check_fallback(soup: BeautifulSoup, game: Game, version: str) -> str:
        """On a first check with nothing found, take any version on the page as current."""
        if not version and not game.current_version:
            version = extract_version_from_page(soup)
            if version:
                game.current_version = version
        return version