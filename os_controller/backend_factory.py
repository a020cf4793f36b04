"""Window backend factory."""

from __future__ import annotations

from executor.command_executor import CommandExecutor
from os_controller.backends.hyprland import HyprlandBackend
from os_controller.backends.wlrctl import WlrctlBackend
from os_controller.backends.wmctrl import WmctrlBackend
from os_controller.base_backend import WindowBackend
from os_controller.environment import BackendKind

BACKENDS: dict[BackendKind, type[WindowBackend]] = {
    BackendKind.HYPRLAND: HyprlandBackend,
    BackendKind.WLRCTL: WlrctlBackend,
    BackendKind.WMCTRL: WmctrlBackend,
}


def build_backend(kind: BackendKind, executor: CommandExecutor) -> WindowBackend:
    """Build the backend implementing `kind` on top of `executor`."""
    return BACKENDS[kind](executor)
