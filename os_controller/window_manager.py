"""Window service listing and focusing windows on the active backend."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from executor.command_executor import CommandExecutor, SubprocessExecutor
from os_controller.backend_factory import build_backend
from os_controller.base_backend import WindowBackend
from os_controller.environment import BackendKind, detect_backend
from world_model.desktop_state import WindowEntry


class IconLookup(Protocol):
    def resolve_icon(self, token: str) -> str | None:
        ...


class WindowService:
    """Facade over the window backends.

    The backend is re-detected from the environment on every call; only
    `forced_backend` pins it.
    """

    def __init__(
        self,
        executor: CommandExecutor | None = None,
        icon_resolver: IconLookup | None = None,
        environ: Mapping[str, str] | None = None,
        forced_backend: BackendKind | None = None,
        enrich_icons: bool = True,
    ) -> None:
        self.executor = executor or SubprocessExecutor()
        self.icon_resolver = icon_resolver
        self.environ = environ
        self.forced_backend = forced_backend
        self.enrich_icons = enrich_icons
        self.logger = logging.getLogger("omnibar.window_manager")

    def backend_kind(self) -> BackendKind:
        if self.forced_backend is not None:
            return self.forced_backend
        return detect_backend(self.environ)

    def _backend(self) -> WindowBackend:
        kind = self.backend_kind()
        self.logger.debug("Using %s window backend", kind.value)
        return build_backend(kind, self.executor)

    def list_windows(self, enrich_icons: bool | None = None) -> list[WindowEntry]:
        """List windows, filling missing icons from the window class.

        `enrich_icons` overrides the service default for this call only.
        """
        windows = self._backend().list_windows()
        enrich = self.enrich_icons if enrich_icons is None else enrich_icons
        if enrich and self.icon_resolver is not None:
            for window in windows:
                if window.icon is None:
                    window.icon = self.icon_resolver.resolve_icon(window.window_class.lower())
        self.logger.debug("Listed %d windows", len(windows))
        return windows

    def focus_window(self, address: str) -> None:
        self._backend().focus_window(address)
