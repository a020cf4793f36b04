"""Icon-theme index lookup backed by pyxdg."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from xdg.IconTheme import getIconPath

logger = logging.getLogger("omnibar.icons.theme")

DEFAULT_THEME_SIZES: tuple[int, ...] = (48, 32, 64, 128, 256)
THEME_EXTENSIONS: tuple[str, ...] = ("png", "svg", "xpm")


@dataclass(frozen=True)
class ThemeIcon:
    """One candidate file returned by the theme index."""

    path: str
    icon_type: str
    min_size: int | None = None
    max_size: int | None = None


ThemeLookup = Callable[[str], Iterator[ThemeIcon]]


def lookup_theme_icon(
    token: str,
    sizes: Sequence[int] = DEFAULT_THEME_SIZES,
    theme: str | None = None,
) -> Iterator[ThemeIcon]:
    """Lazily yield theme candidates for `token`, preferred size first.

    Each size is only queried when the caller asks for the next candidate.
    Absolute paths are not theme names; pyxdg would echo them back unchecked.
    """
    if os.path.isabs(token):
        return
    seen: set[str] = set()
    for size in sizes:
        try:
            found = getIconPath(token, size, theme, list(THEME_EXTENSIONS))
        except Exception as exc:
            logger.debug("Theme lookup for %r at %spx failed: %s", token, size, exc)
            return
        if not found or found in seen:
            continue
        seen.add(found)
        yield ThemeIcon(
            path=found,
            icon_type=Path(found).suffix.lstrip(".").lower(),
            min_size=size,
            max_size=size,
        )


def build_theme_lookup(sizes: Sequence[int] = DEFAULT_THEME_SIZES, theme: str | None = None) -> ThemeLookup:
    """Bind configured sizes and theme into a single-argument lookup."""
    sizes = tuple(sizes)

    def lookup(token: str) -> Iterator[ThemeIcon]:
        return lookup_theme_icon(token, sizes=sizes, theme=theme)

    return lookup
