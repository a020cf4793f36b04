"""Session probing for window backend selection."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum


class BackendKind(str, Enum):
    """Window-manager protocols the launcher knows how to speak."""

    HYPRLAND = "hyprland"
    WLRCTL = "wlrctl"
    WMCTRL = "wmctrl"


def detect_backend(environ: Mapping[str, str] | None = None) -> BackendKind:
    """Classify the current session from environment variable presence."""
    env = os.environ if environ is None else environ
    if "HYPRLAND_INSTANCE_SIGNATURE" in env:
        return BackendKind.HYPRLAND
    if "WAYLAND_DISPLAY" in env:
        return BackendKind.WLRCTL
    return BackendKind.WMCTRL
