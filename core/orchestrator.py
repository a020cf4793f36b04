"""Top-level composition root."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.runtime_config import command_timeout, forced_backend, load_effective_config
from executor.command_executor import CommandExecutor, SubprocessExecutor
from icons.icon_cache import IconCache
from icons.icon_resolver import IconResolver
from icons.matchers import DEFAULT_EXTENSIONS, default_matchers
from icons.theme_lookup import DEFAULT_THEME_SIZES, build_theme_lookup
from os_controller.window_manager import WindowService


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    icon_resolver: IconResolver
    window_service: WindowService


class Orchestrator:
    """Creates and wires runtime components.

    One bundle owns one icon cache; every consumer gets the same resolver.
    """

    def __init__(
        self,
        root: Path | None = None,
        user_config: Path | None = None,
        executor: CommandExecutor | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self.user_config = user_config
        self.executor = executor
        self.environ = environ

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root, user_config=self.user_config)
        icons_cfg = config.get("icons", {})
        windows_cfg = config.get("windows", {})

        theme_sizes = [int(s) for s in icons_cfg.get("theme_sizes") or DEFAULT_THEME_SIZES]
        extensions = [str(e) for e in icons_cfg.get("extensions") or DEFAULT_EXTENSIONS]

        icon_resolver = IconResolver(
            cache=IconCache(),
            theme_lookup=build_theme_lookup(sizes=theme_sizes),
            matchers=default_matchers(extensions=extensions),
        )
        executor = self.executor or SubprocessExecutor(timeout=command_timeout(config))
        window_service = WindowService(
            executor=executor,
            icon_resolver=icon_resolver,
            environ=self.environ,
            forced_backend=forced_backend(config),
            enrich_icons=bool(windows_cfg.get("enrich_icons", True)),
        )
        return RuntimeBundle(
            config=config,
            icon_resolver=icon_resolver,
            window_service=window_service,
        )
