"""Typer command handlers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, NoReturn

import typer

from core.orchestrator import Orchestrator, RuntimeBundle
from core.runtime_config import ConfigError, configure_logging
from os_controller.errors import WindowBackendError

_session: dict[str, Any] = {"user_config": None, "bundle": None}


def _runtime(user_config: Path | None = None) -> RuntimeBundle:
    return Orchestrator(user_config=user_config).build()


def _bundle() -> RuntimeBundle:
    if _session["bundle"] is None:
        _session["bundle"] = _runtime(_session["user_config"])
    return _session["bundle"]


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def setup(verbose: bool = False, user_config: Path | None = None) -> None:
    """Build the runtime once per invocation and configure logging."""
    _session["user_config"] = user_config
    _session["bundle"] = None
    try:
        bundle = _bundle()
        configure_logging(bundle.config, verbose=verbose)
    except ConfigError as exc:
        _fail(f"Configuration error: {exc}")


def windows_list(as_json: bool = False, icons: bool = True) -> None:
    """Print the current window list."""
    try:
        windows = _bundle().window_service.list_windows(enrich_icons=None if icons else False)
    except WindowBackendError as exc:
        _fail(str(exc))

    if as_json:
        typer.echo(json.dumps([w.to_payload() for w in windows], indent=2))
        return
    if not windows:
        typer.echo("No windows.")
        return
    for window in windows:
        typer.echo(f"{window.address}\t{window.window_class}\t{window.title}\t{window.icon or '-'}")


def windows_focus(address: str) -> None:
    """Focus one window."""
    try:
        _bundle().window_service.focus_window(address)
    except WindowBackendError as exc:
        _fail(str(exc))
    typer.echo(f"Focused {address}")


def windows_backend() -> None:
    """Print the selected backend."""
    typer.echo(_bundle().window_service.backend_kind().value)


def icons_resolve(tokens: list[str]) -> None:
    """Print one `token<TAB>path` line per token."""
    resolver = _bundle().icon_resolver
    for token in tokens:
        typer.echo(f"{token}\t{resolver.resolve_icon(token) or '-'}")


def icons_debug(tokens: list[str], limit: int = 4) -> None:
    """Dump the per-stage resolution report."""
    resolver = _bundle().icon_resolver
    reports = [resolver.inspect(token, theme_limit=limit) for token in tokens]
    typer.echo(json.dumps(reports, indent=2))


def config_show() -> None:
    """Show effective runtime config."""
    typer.echo(json.dumps(_bundle().config, indent=2))
