"""Hyprland backend driven through `hyprctl` JSON IPC."""

from __future__ import annotations

import json
from typing import Any

from os_controller.base_backend import WindowBackend
from os_controller.errors import ParseFailure
from world_model.desktop_state import WindowEntry


def _string_field(client: Any, key: str) -> str:
    value = client.get(key) if isinstance(client, dict) else None
    return value if isinstance(value, str) else ""


def parse_clients(stdout: bytes | str) -> list[WindowEntry]:
    """Parse `hyprctl clients -j` output into window entries."""
    try:
        clients = json.loads(stdout)
    except ValueError as exc:
        raise ParseFailure(f"Failed to parse hyprctl output: {exc}") from exc
    if not isinstance(clients, list):
        raise ParseFailure(
            f"Failed to parse hyprctl output: expected a JSON array, got {type(clients).__name__}"
        )

    entries: list[WindowEntry] = []
    for client in clients:
        entries.append(
            WindowEntry(
                title=_string_field(client, "title"),
                window_class=_string_field(client, "class"),
                address=_string_field(client, "address"),
            )
        )
    return entries


class HyprlandBackend(WindowBackend):
    program = "hyprctl"

    def list_windows(self) -> list[WindowEntry]:
        output = self._run_checked(["clients", "-j"], "hyprctl command failed")
        return parse_clients(output.stdout)

    def focus_window(self, window_id: str) -> None:
        self._run_checked(
            ["dispatch", "focuswindow", f"address:{window_id}"],
            "Failed to focus window via hyprctl",
        )
        self.logger.info("Focused window %s", window_id)
