"""Desktop state schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WindowEntry(BaseModel):
    """One toplevel window as reported by the active window backend.

    `address` is a backend-scoped handle valid only while the window and the
    compositor session live.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    window_class: str = Field(default="", alias="class")
    address: str = ""
    icon: str | None = None

    def to_payload(self) -> dict[str, str | None]:
        return self.model_dump(by_alias=True)
