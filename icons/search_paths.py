"""Ordered base directories for the heuristic icon search."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

DEFAULT_DATA_DIRS: tuple[str, ...] = ("/usr/share", "/usr/local/share")

HICOLOR_APP_DIRS: tuple[str, ...] = (
    "icons/hicolor/48x48/apps",
    "icons/hicolor/32x32/apps",
    "icons/hicolor/128x128/apps",
    "icons/hicolor/scalable/apps",
)

STEAM_LIBRARY_CACHE = ".steam/root/appcache/librarycache"


def system_data_dirs(environ: Mapping[str, str]) -> list[Path]:
    """Split `XDG_DATA_DIRS`; empty entries are ignored."""
    raw = environ.get("XDG_DATA_DIRS")
    if raw is None:
        return [Path(d) for d in DEFAULT_DATA_DIRS]
    dirs = [Path(d) for d in raw.split(":") if d]
    return dirs or [Path(d) for d in DEFAULT_DATA_DIRS]


def user_data_dir(environ: Mapping[str, str], home: Path) -> Path:
    """Return `$XDG_DATA_HOME`, falling back to `~/.local/share`."""
    data_home = environ.get("XDG_DATA_HOME", "")
    if data_home and os.path.isabs(data_home):
        return Path(data_home)
    return home / ".local" / "share"


def icon_search_dirs(
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> list[Path]:
    """Build candidate directories in search priority order."""
    env = os.environ if environ is None else environ
    home_dir = home if home is not None else Path.home()

    search: list[Path] = []
    for base in system_data_dirs(env):
        search.extend(base / suffix for suffix in HICOLOR_APP_DIRS)
        search.append(base / "pixmaps")
        search.append(base / "icons")

    local = user_data_dir(env, home_dir)
    search.extend(local / suffix for suffix in HICOLOR_APP_DIRS)
    search.append(local / "icons")

    search.append(home_dir / STEAM_LIBRARY_CACHE)
    search.append(home_dir / ".local/share/icons/hicolor/48x48/apps")
    return search
