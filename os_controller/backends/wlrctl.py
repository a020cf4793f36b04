"""wlroots foreign-toplevel backend driven through `wlrctl`."""

from __future__ import annotations

from os_controller.base_backend import WindowBackend
from world_model.desktop_state import WindowEntry


def parse_toplevels(text: str) -> list[WindowEntry]:
    """Parse `wlrctl toplevel list` lines of the form `<app-id>: <title>`.

    The protocol exposes no per-window id, so the app-id doubles as the
    address.
    """
    entries: list[WindowEntry] = []
    for line in text.splitlines():
        app_id, sep, title = line.partition(":")
        if not sep:
            continue
        app_id = app_id.strip()
        entries.append(WindowEntry(title=title.strip(), window_class=app_id, address=app_id))
    return entries


class WlrctlBackend(WindowBackend):
    program = "wlrctl"

    def list_windows(self) -> list[WindowEntry]:
        output = self._run_checked(["toplevel", "list"], "wlrctl command failed")
        return parse_toplevels(output.stdout_text())

    def focus_window(self, window_id: str) -> None:
        # Focuses by app-id; with several windows of one app the compositor picks.
        self._run_checked(["toplevel", "focus", window_id], "Failed to focus window via wlrctl")
        self.logger.info("Focused toplevel %s", window_id)
