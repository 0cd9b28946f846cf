"""Commit range resolution.

Picks what the linter should check from the CI environment, an optional
commit-message file and a few git queries. Rules are tried in order and the
first one that applies wins:

1. GitHub Actions pull request: base sha (or origin/<base ref>) .. HEAD
2. GitHub Actions push with a real "before" commit: before .. HEAD
3. GitHub Actions otherwise: HEAD only
4. pre-commit.ci: PRE_COMMIT_FROM_REF .. PRE_COMMIT_TO_REF
5. Any other CI: merge-base with the default branch .. HEAD
6. Local: the message file if one was given, else merge-base .. HEAD, else HEAD

Git failures never abort resolution; each rule has a fallback.
"""

from __future__ import annotations

from pathlib import Path

from glw.core.environment import CIEnvironment
from glw.core.result import Err, Ok
from glw.core.target import (
    CommitRange,
    MessageFile,
    Resolution,
    SingleCommit,
    TargetSource,
)
from glw.git.repository import GitQuery

__all__ = [
    "CommitRangeResolver",
    "DEFAULT_BRANCH_CANDIDATES",
    "FALLBACK_BRANCH",
    "HEAD",
]

HEAD = "HEAD"

# Probed in this order; the first that exists is the default branch.
DEFAULT_BRANCH_CANDIDATES = ("origin/main", "origin/master", "origin/develop")
FALLBACK_BRANCH = "origin/HEAD"


class CommitRangeResolver:
    """Decide what to lint for the current context.

    Attributes:
        env: CI environment snapshot
        git: Git query capability (a `Repository` in production)
    """

    def __init__(self, env: CIEnvironment, git: GitQuery) -> None:
        self.env = env
        self.git = git

    def resolve(self, message_file: Path | None = None) -> Resolution:
        """Resolve the lint target.

        Args:
            message_file: Commit message file passed by a commit-msg hook.
                Only used outside CI, and only if it is an existing file.
        """
        env = self.env

        if env.github_actions:
            return self._resolve_github()

        refs = env.pre_commit_refs
        if refs is not None:
            return Resolution(CommitRange(*refs), TargetSource.PRE_COMMIT_CI)

        if env.ci:
            branch = self.default_branch()
            return Resolution(
                CommitRange(self._merge_base_or(branch), HEAD),
                TargetSource.GENERIC_CI,
            )

        return self._resolve_local(message_file)

    def default_branch(self) -> str:
        """First existing candidate branch, else origin/HEAD (unverified)."""
        for candidate in DEFAULT_BRANCH_CANDIDATES:
            if isinstance(self.git.resolve_ref(candidate), Ok):
                return candidate
        return FALLBACK_BRANCH

    def _resolve_github(self) -> Resolution:
        env = self.env
        if env.is_pull_request:
            base = env.github_base_sha or f"origin/{env.github_base_ref}"
            return Resolution(CommitRange(base, HEAD), TargetSource.GITHUB_PULL_REQUEST)

        before = env.push_before
        if before is not None:
            return Resolution(CommitRange(before, HEAD), TargetSource.GITHUB_PUSH)

        return Resolution(SingleCommit(HEAD), TargetSource.GITHUB_LAST_COMMIT)

    def _resolve_local(self, message_file: Path | None) -> Resolution:
        if message_file is not None and message_file.is_file():
            return Resolution(MessageFile(message_file), TargetSource.LOCAL_MESSAGE)

        # Commits on this branch that are not on the remote default branch.
        branch = self.default_branch()
        match self.git.resolve_ref(branch):
            case Ok(_):
                return Resolution(
                    CommitRange(self._merge_base_or(branch), HEAD),
                    TargetSource.LOCAL_BRANCH,
                )
            case Err(_):
                return Resolution(SingleCommit(HEAD), TargetSource.LOCAL_LAST_COMMIT)

    def _merge_base_or(self, branch: str) -> str:
        """Merge-base of HEAD and `branch`, or `branch` itself if there is none."""
        return self.git.merge_base(HEAD, branch).unwrap_or(branch)
