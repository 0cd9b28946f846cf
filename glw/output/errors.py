"""Error presentation and exit code mapping for linter runs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from glw.core.errors import ErrorCode
from glw.output.console import Style
from glw.services.linter import LinterError, LinterFailed, LinterMissing

if TYPE_CHECKING:
    from glw.output.console import ConsoleProtocol

__all__ = ["print_linter_error", "linter_exit_code"]


def print_linter_error(error: LinterError, console: ConsoleProtocol) -> None:
    """Print a linter error.

    Violations are already reported by the linter itself, so a plain
    non-zero exit only gets a dim trailer.
    """
    match error:
        case LinterMissing(command=command, reason=reason):
            console.error(f"cannot run {command[0]}: {reason}")
            console.print("hint: install gitlint (pip install gitlint) or set 'linter'", Style.DIM)
        case LinterFailed(command=command, returncode=rc) if rc < 0:
            console.print(f"{command[0]} was killed by signal {-rc}", Style.DIM)
        case LinterFailed(command=command, returncode=rc):
            console.print(f"{command[0]} exited with {rc}", Style.DIM)


def linter_exit_code(error: LinterError) -> int:
    """Exit code for a failed run: the linter's own code when it ran.

    A linter killed by signal N exits 128 + N, as a shell would report it.
    """
    match error:
        case LinterMissing():
            return int(ErrorCode.NOT_FOUND)
        case LinterFailed(returncode=rc) if rc < 0:
            return 128 - rc
        case LinterFailed(returncode=rc):
            return rc
