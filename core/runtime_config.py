"""Configuration loading and logging bootstrapping."""

from __future__ import annotations

import copy
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from os_controller.environment import BackendKind

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    },
    "windows": {
        "backend": "auto",
        "command_timeout_seconds": 3.0,
        "enrich_icons": True,
    },
    "icons": {
        "theme_sizes": [48, 32, 64, 128, 256],
        "extensions": ["png", "svg", "xpm", "ico", "jpg"],
    },
}


class ConfigError(ValueError):
    """Raised for malformed configuration files or values."""


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def user_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return `$XDG_CONFIG_HOME/omnibar/resolver.yaml`."""
    env = os.environ if environ is None else environ
    config_home = env.get("XDG_CONFIG_HOME", "")
    base = Path(config_home) if config_home and os.path.isabs(config_home) else Path.home() / ".config"
    return base / "omnibar" / "resolver.yaml"


def load_effective_config(root: Path, user_config: Path | None = None) -> dict[str, Any]:
    """Merge built-in defaults, `<root>/config/default.yaml` and the user file."""
    merged = copy.deepcopy(DEFAULT_CONFIG)
    merged = merge_dicts(merged, load_yaml(root / "config" / "default.yaml"))
    merged = merge_dicts(merged, load_yaml(user_config or user_config_path()))
    return merged


def forced_backend(config: dict[str, Any]) -> BackendKind | None:
    """Return the configured backend, or `None` for environment detection."""
    value = str(config.get("windows", {}).get("backend", "auto")).strip().lower()
    if value in {"", "auto"}:
        return None
    try:
        return BackendKind(value)
    except ValueError as exc:
        choices = ", ".join(["auto", *(kind.value for kind in BackendKind)])
        raise ConfigError(f"Unknown window backend {value!r}; expected one of: {choices}") from exc


def command_timeout(config: dict[str, Any]) -> float | None:
    value = config.get("windows", {}).get("command_timeout_seconds")
    if value is None:
        return None
    timeout = float(value)
    if timeout <= 0:
        raise ConfigError("windows.command_timeout_seconds must be positive or null.")
    return timeout


def configure_logging(config: dict[str, Any], verbose: bool = False) -> None:
    """Apply the configured log level and format to the root logger."""
    log_cfg = config.get("logging", {})
    level_name = "DEBUG" if verbose else str(log_cfg.get("level", "WARNING")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ConfigError(f"Unknown logging level: {level_name}")
    logging.basicConfig(
        level=level,
        format=str(log_cfg.get("format", DEFAULT_CONFIG["logging"]["format"])),
        force=True,
    )
