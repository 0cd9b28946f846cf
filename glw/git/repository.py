"""Git repository queries.

Only the plumbing queries needed to pick a commit range live here. All
return Result types; a failure just means "not found" to the caller.

Usage:
    repo = Repository(Path("."))

    match repo.merge_base("HEAD", "origin/main"):
        case Ok(sha):
            print(f"Branched off at {sha}")
        case Err(e):
            print(f"No merge-base: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from glw.core.result import Err, Ok, Result
from glw.platform.process import ProcessError
from glw.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0

__all__ = [
    "GitError",
    "GitQuery",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class GitQuery(Protocol):
    """The git capability the commit range resolver depends on."""

    def resolve_ref(self, name: str) -> Result[str, GitError]:
        """Resolve `name` to a commit sha, Err if it does not exist."""
        ...

    def merge_base(self, a: str, b: str) -> Result[str, GitError]:
        """Nearest common ancestor of `a` and `b`, Err if there is none."""
        ...


class Repository:
    """Git repository rooted at `path` (any directory inside a work tree works)."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def resolve_ref(self, name: str) -> Result[str, GitError]:
        """Resolve a ref with `git rev-parse --verify`.

        Returns:
            Ok(sha) if the ref names a commit
            Err(GitError) if it does not, or git itself failed
        """
        result = self._run(["rev-parse", "--verify", "--quiet", f"{name}^{{commit}}"])
        match result:
            case Err(e):
                return Err(self._error(f"rev-parse --verify {name}", e, f"unknown ref: {name}"))
            case Ok(stdout):
                return Ok(stdout.strip())

    def root(self) -> Result[Path, GitError]:
        """Top-level directory of the work tree containing `path`.

        Returns:
            Ok(path) inside a work tree
            Err(GitError) outside one, or if git is unavailable
        """
        match self._run(["rev-parse", "--show-toplevel"]):
            case Err(e):
                return Err(self._error("rev-parse --show-toplevel", e, "not a git work tree"))
            case Ok(stdout):
                top = stdout.strip()
                if not top:
                    return Err(GitError(command="rev-parse --show-toplevel", message="empty output"))
                return Ok(Path(top))

    def merge_base(self, a: str, b: str) -> Result[str, GitError]:
        """Find the merge-base of two refs with `git merge-base`.

        Returns:
            Ok(sha) on success
            Err(GitError) if the refs are unknown or share no history
        """
        result = self._run(["merge-base", a, b])
        match result:
            case Err(e):
                return Err(self._error(f"merge-base {a} {b}", e, f"no merge-base for {a} and {b}"))
            case Ok(stdout):
                sha = stdout.strip()
                if not sha:
                    return Err(GitError(command=f"merge-base {a} {b}", message="empty output"))
                return Ok(sha)

    def _error(self, command: str, e: ProcessError, fallback: str) -> GitError:
        return GitError(
            command=command,
            message=e.stderr.strip() or fallback,
            returncode=e.returncode,
        )

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(
            ["git", "-C", str(self.path), *args],
            cwd=self.path,
            timeout=_GIT_TIMEOUT_SECONDS,
        )
