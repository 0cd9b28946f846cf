"""What the linter should look at.

A resolved target is one of three shapes. Each knows the linter arguments
that select it:

    CommitRange("abc123", "HEAD").linter_args()  ->  ["--commits", "abc123..HEAD"]
    SingleCommit("HEAD").linter_args()           ->  ["--commits", "HEAD"]
    MessageFile(Path(".git/COMMIT_EDITMSG"))     ->  ["--msg-filename", ".git/COMMIT_EDITMSG"]
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

__all__ = [
    "CommitRange",
    "SingleCommit",
    "MessageFile",
    "ResolvedTarget",
    "TargetSource",
    "Resolution",
]


@dataclass(frozen=True, slots=True)
class CommitRange:
    """All commits reachable from `end` but not from `start`."""

    start: str
    end: str

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

    def linter_args(self) -> list[str]:
        return ["--commits", str(self)]


@dataclass(frozen=True, slots=True)
class SingleCommit:
    """Exactly one commit."""

    ref: str

    def __str__(self) -> str:
        return self.ref

    def linter_args(self) -> list[str]:
        return ["--commits", self.ref]


@dataclass(frozen=True, slots=True)
class MessageFile:
    """A commit message that has not been committed yet."""

    path: Path

    def __str__(self) -> str:
        return str(self.path)

    def linter_args(self) -> list[str]:
        return ["--msg-filename", str(self.path)]


type ResolvedTarget = CommitRange | SingleCommit | MessageFile


class TargetSource(Enum):
    """Which rule of the resolution chain produced a target."""

    GITHUB_PULL_REQUEST = auto()
    GITHUB_PUSH = auto()
    GITHUB_LAST_COMMIT = auto()
    PRE_COMMIT_CI = auto()
    GENERIC_CI = auto()
    LOCAL_MESSAGE = auto()
    LOCAL_BRANCH = auto()
    LOCAL_LAST_COMMIT = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Resolution:
    """A resolved target and the rule that picked it."""

    target: ResolvedTarget
    source: TargetSource

    def describe(self) -> str:
        """One-line summary of what is about to be linted."""
        match self.source:
            case TargetSource.GITHUB_PULL_REQUEST:
                return f"Running gitlint in GitHub Actions for PR commits: {self.target}"
            case TargetSource.GITHUB_PUSH:
                return f"Running gitlint in GitHub Actions for pushed commits: {self.target}"
            case TargetSource.GITHUB_LAST_COMMIT:
                return "Running gitlint in GitHub Actions for last commit"
            case TargetSource.PRE_COMMIT_CI:
                return f"Running gitlint in pre-commit.ci for commits: {self.target}"
            case TargetSource.GENERIC_CI:
                return f"Running gitlint in CI for commits: {self.target}"
            case TargetSource.LOCAL_MESSAGE:
                return "Running gitlint locally for commit message"
            case TargetSource.LOCAL_BRANCH:
                start = self.target.start if isinstance(self.target, CommitRange) else self.target
                return f"Running gitlint locally for commits since {start}"
            case TargetSource.LOCAL_LAST_COMMIT:
                return "Running gitlint locally for last commit"
