"""CLI entrypoint for omnibar-resolver."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Window listing and icon resolution for the Omnibar launcher")
windows_app = typer.Typer(help="Window commands")
icons_app = typer.Typer(help="Icon commands")
config_app = typer.Typer(help="Configuration commands")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config: Path | None = typer.Option(None, "--config", help="User config file to merge"),
) -> None:
    """Load configuration and set up logging."""
    commands.setup(verbose=verbose, user_config=config)


@windows_app.command("list")
def windows_list_cmd(
    as_json: bool = typer.Option(False, "--json", help="Print entries as JSON"),
    icons: bool = typer.Option(True, "--icons/--no-icons", help="Resolve window icons"),
) -> None:
    """List open windows on the active backend."""
    commands.windows_list(as_json=as_json, icons=icons)


@windows_app.command("focus")
def windows_focus_cmd(
    address: str = typer.Argument(..., help="Backend window address"),
) -> None:
    """Focus a window by its backend address."""
    commands.windows_focus(address=address)


@windows_app.command("backend")
def windows_backend_cmd() -> None:
    """Show which window backend would be used."""
    commands.windows_backend()


@icons_app.command("resolve")
def icons_resolve_cmd(
    tokens: list[str] = typer.Argument(..., help="Icon names or paths"),
) -> None:
    """Resolve icon tokens to files."""
    commands.icons_resolve(tokens=tokens)


@icons_app.command("debug")
def icons_debug_cmd(
    tokens: list[str] = typer.Argument(..., help="Icon names or paths"),
    limit: int = typer.Option(4, min=1, max=20, help="Theme candidates to show"),
) -> None:
    """Show every resolution stage for icon tokens."""
    commands.icons_debug(tokens=tokens, limit=limit)


@config_app.command("show")
def config_show_cmd() -> None:
    """Show effective configuration."""
    commands.config_show()


app.add_typer(windows_app, name="windows")
app.add_typer(icons_app, name="icons")
app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
