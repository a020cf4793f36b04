"""Cached icon resolution from icon tokens to files on disk.

A token is whatever a caller holds: a desktop-entry `Icon=` value, an
absolute path, or a lowercased window class. Resolution tries, in order:

1. the token itself as an absolute path;
2. the first candidate of the icon-theme index;
3. a heuristic scan of well-known icon directories (see `search_paths`)
   using the configured matcher rules;
4. the theme index again with the token's file extension stripped.

Every outcome, including a miss, is memoized for the life of the resolver.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from itertools import islice
from pathlib import Path
from typing import Any

from icons.icon_cache import MISSING, IconCache
from icons.matchers import ExistsCheck, IconMatcher, default_matchers
from icons.search_paths import icon_search_dirs
from icons.theme_lookup import ThemeIcon, ThemeLookup, lookup_theme_icon

logger = logging.getLogger("omnibar.icons")


def _path_exists(path: Path) -> bool:
    return path.exists()


def canonicalize(path: str | Path) -> str:
    """Resolve symlinks; fall back to the path as given when that fails."""
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError) as exc:
        logger.debug("Could not canonicalize %s: %s", path, exc)
        return str(path)


class IconResolver:
    """Resolves icon tokens to absolute file paths, backed by an `IconCache`."""

    def __init__(
        self,
        cache: IconCache | None = None,
        theme_lookup: ThemeLookup | None = None,
        matchers: Sequence[IconMatcher] | None = None,
        search_dirs: Callable[[], list[Path]] | None = None,
        exists: ExistsCheck | None = None,
    ) -> None:
        self.cache = cache if cache is not None else IconCache()
        self.theme_lookup = theme_lookup or lookup_theme_icon
        self.matchers = list(matchers) if matchers is not None else default_matchers()
        self.search_dirs = search_dirs or icon_search_dirs
        self.exists = exists or _path_exists

    def resolve_icon(self, token: str) -> str | None:
        """Return a path for `token`, or `None` when nothing matches."""
        cached = self.cache.get(token)
        if cached is not MISSING:
            return cached

        result = self._resolve_uncached(token)
        self.cache.store(token, result)
        if result is None:
            logger.debug("No icon found for %r", token)
        else:
            logger.debug("Resolved icon %r -> %s", token, result)
        return result

    def _resolve_uncached(self, token: str) -> str | None:
        if not token:
            return None

        direct = self._direct_path(token)
        if direct is not None:
            return direct

        themed = self._theme_first(token)
        if themed is not None:
            return canonicalize(themed.path)

        found = self._search(token)
        if found is not None:
            return canonicalize(found)

        stem = Path(token).stem
        if stem and stem != token:
            themed = self._theme_first(stem)
            if themed is not None:
                return canonicalize(themed.path)
        return None

    def _direct_path(self, token: str) -> str | None:
        if os.path.isabs(token) and self.exists(Path(token)):
            return canonicalize(token)
        return None

    def _theme_candidates(self, token: str, limit: int) -> list[ThemeIcon]:
        try:
            return list(islice(self.theme_lookup(token), limit))
        except Exception as exc:
            logger.warning("Icon theme lookup failed for %r: %s", token, exc)
            return []

    def _theme_first(self, token: str) -> ThemeIcon | None:
        candidates = self._theme_candidates(token, limit=1)
        return candidates[0] if candidates else None

    def _search(self, token: str) -> Path | None:
        for directory in self.search_dirs():
            if not self.exists(directory):
                continue
            for matcher in self.matchers:
                hit = matcher.match(directory, token, self.exists)
                if hit is not None:
                    return hit
        return None

    def inspect(self, token: str, theme_limit: int = 4) -> dict[str, Any]:
        """Report what every resolution stage finds for `token`.

        Leaves the cache untouched; meant for diagnosing missing icons.
        """
        cached = self.cache.get(token)
        heuristic = self._search(token) if token else None
        stem = Path(token).stem if token else ""
        return {
            "token": token,
            "cached": None if cached is MISSING else {"value": cached},
            "direct": self._direct_path(token) if token else None,
            "theme_candidates": [
                {
                    "path": icon.path,
                    "icon_type": icon.icon_type,
                    "min_size": icon.min_size,
                    "max_size": icon.max_size,
                }
                for icon in (self._theme_candidates(token, theme_limit) if token else [])
            ],
            "heuristic": str(heuristic) if heuristic is not None else None,
            "stem": stem if stem and stem != token else None,
            "result": self._resolve_uncached(token),
        }
