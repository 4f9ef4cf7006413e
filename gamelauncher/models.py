"""Game and settings records and their JSON form."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_TIME_RE = re.compile(
    r"^(?P<base>[^.]*T\d{2}:\d{2}:\d{2})(?:\.(?P<frac>\d+))?(?P<zone>.*)$"
)


def _now() -> datetime:
    return datetime.now().astimezone()


def _format_time(moment: datetime) -> str:
    return moment.isoformat()


def _parse_time(value: Optional[str]) -> datetime:
    """Parse an RFC 3339 timestamp, including nanosecond fractions and 'Z'."""
    if not value:
        return ZERO_TIME
    match = _TIME_RE.match(value)
    if match is None:
        raise ValueError(f"invalid timestamp: {value!r}")
    frac = match["frac"]
    zone = match["zone"]
    if zone in ("Z", "z"):
        zone = "+00:00"
    text = match["base"]
    if frac:
        text += "." + frac[:6].ljust(6, "0")
    moment = datetime.fromisoformat(text + zone)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass
class Game:
    """A game known to the launcher."""

    name: str
    executable: str
    folder: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    source_url: str = ""
    last_check: datetime = field(default_factory=_now)
    last_update: datetime = field(default_factory=_now)
    version: str = ""
    description: str = ""
    icon_path: str = ""
    is_installed: bool = True
    version_selector: str = ""
    version_pattern: str = ""
    current_version: str = ""

    def update_info(self, version: str) -> None:
        """Record a newly found version."""
        self.version = version
        self.last_update = _now()

    def mark_checked(self) -> None:
        """Record that the game's source was just checked."""
        self.last_check = _now()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "executable": self.executable,
            "folder": self.folder,
            "source_url": self.source_url,
            "last_check": _format_time(self.last_check),
            "last_update": _format_time(self.last_update),
            "version": self.version,
            "description": self.description,
            "icon_path": self.icon_path,
            "is_installed": self.is_installed,
            "version_selector": self.version_selector,
            "version_pattern": self.version_pattern,
            "current_version": self.current_version,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Game":
        """Build a game from its JSON form; missing fields take empty values."""
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            executable=str(data.get("executable", "")),
            folder=str(data.get("folder", "")),
            source_url=str(data.get("source_url", "")),
            last_check=_parse_time(data.get("last_check")),
            last_update=_parse_time(data.get("last_update")),
            version=str(data.get("version", "")),
            description=str(data.get("description", "")),
            icon_path=str(data.get("icon_path", "")),
            is_installed=bool(data.get("is_installed", False)),
            version_selector=str(data.get("version_selector", "")),
            version_pattern=str(data.get("version_pattern", "")),
            current_version=str(data.get("current_version", "")),
        )


def new_game(name: str, executable: str, folder: str) -> Game:
    """Create an installed game with a fresh unique id."""
    return Game(name=name, executable=executable, folder=folder)


@dataclass
class Settings:
    """Application settings."""

    check_interval: int = 3600  # seconds
    auto_launch: bool = False
    notifications: bool = True
    start_minimized: bool = False
    theme: str = "light"

    def to_dict(self) -> dict[str, Any]:
        return {
            "check_interval": self.check_interval,
            "auto_launch": self.auto_launch,
            "notifications": self.notifications,
            "start_minimized": self.start_minimized,
            "theme": self.theme,
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Settings":
        """Build settings from their JSON form; missing fields take empty values."""
        data = data or {}
        return cls(
            check_interval=int(data.get("check_interval", 0)),
            auto_launch=bool(data.get("auto_launch", False)),
            notifications=bool(data.get("notifications", False)),
            start_minimized=bool(data.get("start_minimized", False)),
            theme=str(data.get("theme", "")),
        )


def default_settings() -> Settings:
    """Return the default application settings."""
    return Settings()