"""Thread-safe, non-expiring icon resolution cache."""

from __future__ import annotations

import threading


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class IconCache:
    """Maps icon tokens to resolved paths, including cached misses (`None`).

    Entries are never evicted. The lock is held for one read or write only.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str | None] = {}
        self._lock = threading.Lock()

    def get(self, token: str) -> str | None | _Missing:
        """Return the cached value, or `MISSING` if `token` was never stored."""
        with self._lock:
            return self._entries.get(token, MISSING)

    def store(self, token: str, value: str | None) -> None:
        with self._lock:
            self._entries[token] = value

    def snapshot(self) -> dict[str, str | None]:
        with self._lock:
            return dict(self._entries)

    def __contains__(self, token: object) -> bool:
        with self._lock:
            return token in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
