"""Process exit codes.

The wrapper's own exit code is normally whatever the linter returned. These
codes cover the cases where the linter never ran.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for failures owned by glw itself.

    - 0: Success
    - 2: Environment error (unreadable or invalid config file)
    - 127: Linter executable could not be launched (shell convention)
    """

    OK = 0
    ENV_ERROR = 2
    NOT_FOUND = 127
