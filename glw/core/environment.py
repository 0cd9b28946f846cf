"""CI environment snapshot.

The resolver never reads `os.environ` directly. The CLI takes a snapshot once
with `CIEnvironment.from_env(os.environ)` and passes it in, which keeps the
decision logic a pure function of its inputs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .structured import get_str

__all__ = ["CIEnvironment", "NULL_COMMIT"]

# git reports this as the "before" commit when a push creates a branch.
NULL_COMMIT = "0" * 40


@dataclass(frozen=True, slots=True)
class CIEnvironment:
    """Recognized CI variables.

    Attributes:
        github_actions: GITHUB_ACTIONS is set
        github_base_ref: GITHUB_BASE_REF (pull request target branch)
        github_base_sha: GITHUB_BASE_SHA (pull request base commit)
        github_event_before: GITHUB_EVENT_BEFORE (push "before" commit)
        pre_commit_from_ref: PRE_COMMIT_FROM_REF (pre-commit.ci)
        pre_commit_to_ref: PRE_COMMIT_TO_REF (pre-commit.ci)
        ci: CI is set (any other CI system)
    """

    github_actions: bool = False
    github_base_ref: str | None = None
    github_base_sha: str | None = None
    github_event_before: str | None = None
    pre_commit_from_ref: str | None = None
    pre_commit_to_ref: str | None = None
    ci: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> CIEnvironment:
        """Build a snapshot from an environment mapping."""
        return cls(
            github_actions=get_str(env, "GITHUB_ACTIONS") is not None,
            github_base_ref=get_str(env, "GITHUB_BASE_REF"),
            github_base_sha=get_str(env, "GITHUB_BASE_SHA"),
            github_event_before=get_str(env, "GITHUB_EVENT_BEFORE"),
            pre_commit_from_ref=get_str(env, "PRE_COMMIT_FROM_REF"),
            pre_commit_to_ref=get_str(env, "PRE_COMMIT_TO_REF"),
            ci=get_str(env, "CI") is not None,
        )

    @property
    def is_pull_request(self) -> bool:
        return self.github_actions and self.github_base_ref is not None

    @property
    def push_before(self) -> str | None:
        """Push "before" commit, or None when absent or the null commit."""
        if self.github_event_before is None or self.github_event_before == NULL_COMMIT:
            return None
        return self.github_event_before

    @property
    def pre_commit_refs(self) -> tuple[str, str] | None:
        """(from, to) when pre-commit.ci supplied both refs."""
        if self.pre_commit_from_ref is None or self.pre_commit_to_ref is None:
            return None
        return (self.pre_commit_from_ref, self.pre_commit_to_ref)
