"""Window backend failure taxonomy."""

from __future__ import annotations


class WindowBackendError(RuntimeError):
    """Base error for a failed list/focus call against a window backend."""


class ExecutionFailure(WindowBackendError):
    """The backend binary could not be spawned or did not finish in time."""


class CommandFailure(WindowBackendError):
    """The backend binary ran but exited with a non-zero status."""

    def __init__(self, message: str, exit_code: int | None = None, stderr: str = "") -> None:
        detail = stderr.strip()
        if detail:
            message = f"{message}: {detail[:200]}"
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr


class ParseFailure(WindowBackendError):
    """The backend output did not match the expected protocol shape."""
