"""Services: commit range resolution and linter invocation."""

from glw.services.linter import (
    CommandRunner,
    LinterError,
    LinterFailed,
    LinterMissing,
    LinterService,
)
from glw.services.resolver import (
    DEFAULT_BRANCH_CANDIDATES,
    FALLBACK_BRANCH,
    HEAD,
    CommitRangeResolver,
)

__all__ = [
    "CommandRunner",
    "CommitRangeResolver",
    "DEFAULT_BRANCH_CANDIDATES",
    "FALLBACK_BRANCH",
    "HEAD",
    "LinterError",
    "LinterFailed",
    "LinterMissing",
    "LinterService",
]
