"""X11 EWMH backend driven through `wmctrl`."""

from __future__ import annotations

from os_controller.base_backend import WindowBackend
from world_model.desktop_state import WindowEntry

MIN_FIELDS = 5


def parse_window_list(text: str) -> list[WindowEntry]:
    """Parse `wmctrl -l -x` output.

    Columns: window id, desktop, `instance.Class`, client host, title.
    """
    entries: list[WindowEntry] = []
    for line in text.splitlines():
        parts = line.split()
        if len(parts) < MIN_FIELDS:
            continue
        entries.append(
            WindowEntry(
                title=" ".join(parts[4:]),
                window_class=parts[2].split(".")[-1],
                address=parts[0],
            )
        )
    return entries


class WmctrlBackend(WindowBackend):
    program = "wmctrl"

    def list_windows(self) -> list[WindowEntry]:
        output = self._run(["-l", "-x"])
        if not output.exit_ok:
            # wmctrl exits non-zero without a running window manager; whatever it printed is still parsed.
            self.logger.warning(
                "wmctrl -l -x exited with %s: %s", output.exit_code, output.stderr_text().strip()
            )
        return parse_window_list(output.stdout_text())

    def focus_window(self, window_id: str) -> None:
        self._run_checked(["-i", "-a", window_id], "Failed to focus window via wmctrl")
        self.logger.info("Activated window %s", window_id)
