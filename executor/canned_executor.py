"""Deterministic executor returning prepared output for known commands."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from executor.command_executor import CommandOutput, ExecutionError


class CannedExecutor:
    """Replays canned output for expected `(program, args)` pairs.

    Any command without a prepared response raises `ExecutionError`, the
    same way a missing binary would.
    """

    def __init__(
        self,
        responses: Mapping[tuple[str, tuple[str, ...]], CommandOutput] | None = None,
    ) -> None:
        self.responses: dict[tuple[str, tuple[str, ...]], CommandOutput] = dict(responses or {})
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    def add(self, program: str, args: Sequence[str], output: CommandOutput) -> None:
        self.responses[(program, tuple(args))] = output

    def add_stdout(self, program: str, args: Sequence[str], stdout: str | bytes) -> None:
        """Register a successful response with the given stdout."""
        data = stdout.encode("utf-8") if isinstance(stdout, str) else stdout
        self.add(program, args, CommandOutput(exit_ok=True, exit_code=0, stdout=data))

    def execute(self, program: str, args: Sequence[str]) -> CommandOutput:
        key = (program, tuple(args))
        self.calls.append(key)
        if key not in self.responses:
            raise ExecutionError(program, f"no canned response for {' '.join(key[1])!r}")
        return self.responses[key]
