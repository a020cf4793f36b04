"""Window entry model tests."""

from __future__ import annotations

from world_model.desktop_state import WindowEntry


def test_window_entry_serializes_class_key() -> None:
    entry = WindowEntry(title="WezTerm", window_class="org.wezfurlong.wezterm", address="org.wezfurlong.wezterm")

    assert entry.to_payload() == {
        "title": "WezTerm",
        "class": "org.wezfurlong.wezterm",
        "address": "org.wezfurlong.wezterm",
        "icon": None,
    }


def test_window_entry_accepts_protocol_field_names() -> None:
    entry = WindowEntry.model_validate({"class": "foot", "title": "~", "address": "0x1"})

    assert entry.window_class == "foot"
    assert entry.icon is None
