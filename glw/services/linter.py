"""Linter invocation.

Runs the linter once for a resolved target and reports how it went. The
runner is injectable so tests never start a real process.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from glw.core.config import Config
from glw.core.result import Err, Ok, Result
from glw.core.target import ResolvedTarget
from glw.platform.process import ProcessError, run_streaming

__all__ = [
    "CommandRunner",
    "LinterFailed",
    "LinterMissing",
    "LinterError",
    "LinterService",
]

type CommandRunner = Callable[[list[str], Path], Result[None, ProcessError]]


def _default_runner(cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
    return run_streaming(cmd, cwd=cwd)


@dataclass(frozen=True, slots=True)
class LinterMissing:
    """The linter could not be started at all."""

    command: tuple[str, ...]
    reason: str


@dataclass(frozen=True, slots=True)
class LinterFailed:
    """The linter ran and exited non-zero (violations or its own error)."""

    command: tuple[str, ...]
    returncode: int


type LinterError = LinterMissing | LinterFailed


class LinterService:
    """Build and run the linter command.

    Attributes:
        config: Linter command and extra arguments
        cwd: Directory the linter runs in (the repository)
    """

    def __init__(
        self,
        config: Config,
        cwd: Path,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config
        self.cwd = cwd
        self._runner = runner or _default_runner

    def command(self, target: ResolvedTarget) -> list[str]:
        """Full argv for linting `target`."""
        return [*self.config.linter, *self.config.extra_args, *target.linter_args()]

    def run(self, target: ResolvedTarget) -> Result[None, LinterError]:
        """Run the linter on `target`. Never retries."""
        cmd = self.command(target)
        match self._runner(cmd, self.cwd):
            case Ok(_):
                return Ok(None)
            case Err(e) if not e.launched:
                return Err(LinterMissing(command=tuple(cmd), reason=e.stderr))
            case Err(e):
                return Err(LinterFailed(command=tuple(cmd), returncode=e.returncode))
