"""Matcher rules applied to each candidate icon directory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from pathlib import Path

ExistsCheck = Callable[[Path], bool]

DEFAULT_EXTENSIONS: tuple[str, ...] = ("png", "svg", "xpm", "ico", "jpg")
STEAM_ICON_PREFIX = "steam_icon_"


class IconMatcher(ABC):
    """One naming convention for icon files inside a directory."""

    @abstractmethod
    def match(self, directory: Path, token: str, exists: ExistsCheck) -> Path | None:
        """Return the matching file in `directory`, if any."""


class SteamLibraryCacheMatcher(IconMatcher):
    """Steam stores `steam_icon_<appid>` artwork as `<appid>_icon.jpg`."""

    def match(self, directory: Path, token: str, exists: ExistsCheck) -> Path | None:
        if directory.name != "librarycache" or not token.startswith(STEAM_ICON_PREFIX):
            return None
        app_id = token[len(STEAM_ICON_PREFIX):]
        candidate = directory / f"{app_id}_icon.jpg"
        return candidate if exists(candidate) else None


class ExtensionMatcher(IconMatcher):
    """`<token>.<ext>` for each extension in priority order."""

    def __init__(self, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> None:
        self.extensions = tuple(extensions)

    def match(self, directory: Path, token: str, exists: ExistsCheck) -> Path | None:
        for ext in self.extensions:
            candidate = directory / f"{token}.{ext}"
            if exists(candidate):
                return candidate
        return None


def default_matchers(extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> list[IconMatcher]:
    return [SteamLibraryCacheMatcher(), ExtensionMatcher(extensions)]
