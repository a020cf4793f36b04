"""Command execution boundary for external window-manager tools."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger("omnibar.executor")

DEFAULT_TIMEOUT_SECONDS = 3.0


@dataclass(frozen=True)
class CommandOutput:
    """Exit status and raw output of one finished process."""

    exit_ok: bool
    exit_code: int | None
    stdout: bytes = b""
    stderr: bytes = b""

    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


class ExecutionError(RuntimeError):
    """Raised when a process could not be spawned or did not finish."""

    def __init__(self, program: str, reason: str) -> None:
        super().__init__(f"{program}: {reason}")
        self.program = program
        self.reason = reason


class CommandExecutor(Protocol):
    """Anything that can run `program args...` and report its output."""

    def execute(self, program: str, args: Sequence[str]) -> CommandOutput:
        ...


class SubprocessExecutor:
    """Runs commands with `subprocess.run`, bounded by a per-call timeout."""

    def __init__(self, timeout: float | None = DEFAULT_TIMEOUT_SECONDS) -> None:
        self.timeout = timeout

    def execute(self, program: str, args: Sequence[str]) -> CommandOutput:
        command = [program, *args]
        logger.debug("Running %s", command)
        try:
            proc = subprocess.run(command, capture_output=True, timeout=self.timeout)
        except subprocess.TimeoutExpired as exc:
            raise ExecutionError(program, f"timed out after {exc.timeout}s") from exc
        except OSError as exc:
            raise ExecutionError(program, str(exc)) from exc
        return CommandOutput(
            exit_ok=proc.returncode == 0,
            exit_code=proc.returncode,
            stdout=proc.stdout or b"",
            stderr=proc.stderr or b"",
        )
