"""Window backend protocol tests against canned command output."""

from __future__ import annotations

import pytest

from executor.canned_executor import CannedExecutor
from executor.command_executor import CommandOutput
from os_controller.backends.hyprland import HyprlandBackend
from os_controller.backends.wlrctl import WlrctlBackend
from os_controller.backends.wmctrl import WmctrlBackend
from os_controller.errors import CommandFailure, ExecutionFailure, ParseFailure


def failed(stderr: bytes = b"boom", code: int = 1) -> CommandOutput:
    return CommandOutput(exit_ok=False, exit_code=code, stderr=stderr)


def test_hyprland_lists_clients() -> None:
    executor = CannedExecutor()
    executor.add_stdout(
        "hyprctl",
        ["clients", "-j"],
        '[{"class":"org.mozilla.firefox","title":"Mozilla Firefox","address":"0x1"}]',
    )

    windows = HyprlandBackend(executor).list_windows()

    assert len(windows) == 1
    entry = windows[0]
    assert entry.title == "Mozilla Firefox"
    assert entry.window_class == "org.mozilla.firefox"
    assert entry.address == "0x1"
    assert entry.icon is None


def test_hyprland_missing_or_non_string_fields_become_empty() -> None:
    executor = CannedExecutor()
    executor.add_stdout("hyprctl", ["clients", "-j"], '[{"title": "Scratch", "class": 5}]')

    windows = HyprlandBackend(executor).list_windows()

    assert windows[0].title == "Scratch"
    assert windows[0].window_class == ""
    assert windows[0].address == ""


def test_hyprland_non_zero_exit_is_command_failure() -> None:
    executor = CannedExecutor()
    executor.add("hyprctl", ["clients", "-j"], failed(b"HYPRLAND_INSTANCE_SIGNATURE invalid"))

    with pytest.raises(CommandFailure) as excinfo:
        HyprlandBackend(executor).list_windows()
    assert excinfo.value.exit_code == 1
    assert "signature invalid" in str(excinfo.value).lower()


def test_hyprland_non_object_clients_become_empty_entries() -> None:
    executor = CannedExecutor()
    executor.add_stdout(
        "hyprctl",
        ["clients", "-j"],
        '[1, null, {"class": "foot", "title": "~", "address": "0x2"}]',
    )

    windows = HyprlandBackend(executor).list_windows()

    assert [(w.window_class, w.title, w.address) for w in windows] == [
        ("", "", ""),
        ("", "", ""),
        ("foot", "~", "0x2"),
    ]


@pytest.mark.parametrize("stdout", ["not json", "", '{"class": "a"}', '"clients"'])
def test_hyprland_unexpected_shape_is_parse_failure(stdout: str) -> None:
    executor = CannedExecutor()
    executor.add_stdout("hyprctl", ["clients", "-j"], stdout)

    with pytest.raises(ParseFailure):
        HyprlandBackend(executor).list_windows()


def test_missing_binary_is_execution_failure() -> None:
    with pytest.raises(ExecutionFailure) as excinfo:
        HyprlandBackend(CannedExecutor()).list_windows()
    assert "hyprctl" in str(excinfo.value)


def test_hyprland_focus_uses_address_selector() -> None:
    executor = CannedExecutor()
    executor.add_stdout("hyprctl", ["dispatch", "focuswindow", "address:0x55d1"], "ok")

    HyprlandBackend(executor).focus_window("0x55d1")

    assert executor.calls == [("hyprctl", ("dispatch", "focuswindow", "address:0x55d1"))]


def test_hyprland_focus_failure() -> None:
    executor = CannedExecutor()
    executor.add("hyprctl", ["dispatch", "focuswindow", "address:0x1"], failed())

    with pytest.raises(CommandFailure):
        HyprlandBackend(executor).focus_window("0x1")


def test_wlrctl_lists_toplevels() -> None:
    executor = CannedExecutor()
    executor.add_stdout(
        "wlrctl",
        ["toplevel", "list"],
        "org.wezfurlong.wezterm: WezTerm\n"
        "no separator here\n"
        "\n"
        "firefox: Docs: Python 3 - Mozilla Firefox\n",
    )

    windows = WlrctlBackend(executor).list_windows()

    assert [(w.window_class, w.title, w.address) for w in windows] == [
        ("org.wezfurlong.wezterm", "WezTerm", "org.wezfurlong.wezterm"),
        ("firefox", "Docs: Python 3 - Mozilla Firefox", "firefox"),
    ]


def test_wlrctl_non_zero_exit_is_command_failure() -> None:
    executor = CannedExecutor()
    executor.add("wlrctl", ["toplevel", "list"], failed(b"compositor does not support"))

    with pytest.raises(CommandFailure):
        WlrctlBackend(executor).list_windows()


def test_wlrctl_focus_by_app_id() -> None:
    executor = CannedExecutor()
    executor.add_stdout("wlrctl", ["toplevel", "focus", "org.wezfurlong.wezterm"], "")

    WlrctlBackend(executor).focus_window("org.wezfurlong.wezterm")

    assert executor.calls == [("wlrctl", ("toplevel", "focus", "org.wezfurlong.wezterm"))]


def test_wmctrl_lists_windows() -> None:
    executor = CannedExecutor()
    executor.add_stdout(
        "wmctrl",
        ["-l", "-x"],
        "0x02800003  0 pycharm.PyCharm  ubuntu PyCharm Projects\n"
        "0x01000007 -1 short line\n"
        "0x03a00001  1 Navigator.Firefox  ubuntu   Mozilla   Firefox\n",
    )

    windows = WmctrlBackend(executor).list_windows()

    assert [(w.window_class, w.title, w.address) for w in windows] == [
        ("PyCharm", "PyCharm Projects", "0x02800003"),
        ("Firefox", "Mozilla Firefox", "0x03a00001"),
    ]


def test_wmctrl_list_parses_output_despite_non_zero_exit() -> None:
    executor = CannedExecutor()
    executor.add(
        "wmctrl",
        ["-l", "-x"],
        CommandOutput(
            exit_ok=False,
            exit_code=1,
            stdout=b"0x1 0 term.Term host Shell\n",
            stderr=b"Cannot get client list properties.",
        ),
    )

    windows = WmctrlBackend(executor).list_windows()

    assert [w.address for w in windows] == ["0x1"]


def test_wmctrl_focus_by_window_id() -> None:
    executor = CannedExecutor()
    executor.add_stdout("wmctrl", ["-i", "-a", "0x02800003"], "")

    WmctrlBackend(executor).focus_window("0x02800003")

    assert executor.calls == [("wmctrl", ("-i", "-a", "0x02800003"))]


def test_wmctrl_focus_failure() -> None:
    executor = CannedExecutor()
    executor.add("wmctrl", ["-i", "-a", "0xdead"], failed())

    with pytest.raises(CommandFailure):
        WmctrlBackend(executor).focus_window("0xdead")
