"""Base interface for window-manager protocol backends."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from executor.command_executor import CommandExecutor, CommandOutput, ExecutionError
from os_controller.errors import CommandFailure, ExecutionFailure
from world_model.desktop_state import WindowEntry


class WindowBackend(ABC):
    """Abstract window backend speaking one external command-line protocol."""

    program: str = ""

    def __init__(self, executor: CommandExecutor) -> None:
        self.executor = executor
        self.logger = logging.getLogger(f"omnibar.backends.{self.program}")

    @abstractmethod
    def list_windows(self) -> list[WindowEntry]:
        """Return all toplevel windows, without icons."""
        pass

    @abstractmethod
    def focus_window(self, window_id: str) -> None:
        """Raise and focus the window with the given backend handle."""
        pass

    def _run(self, args: Sequence[str]) -> CommandOutput:
        try:
            return self.executor.execute(self.program, list(args))
        except ExecutionError as exc:
            raise ExecutionFailure(f"Failed to execute {self.program}: {exc.reason}") from exc

    def _run_checked(self, args: Sequence[str], failure: str) -> CommandOutput:
        output = self._run(args)
        if not output.exit_ok:
            raise CommandFailure(failure, exit_code=output.exit_code, stderr=output.stderr_text())
        return output
