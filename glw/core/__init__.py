"""Core building blocks: results, exit codes, environment, config, targets."""

from .config import Config, ConfigError, find_config, load_config
from .environment import NULL_COMMIT, CIEnvironment
from .errors import ErrorCode
from .result import Err, Ok, Result
from .target import (
    CommitRange,
    MessageFile,
    Resolution,
    ResolvedTarget,
    SingleCommit,
    TargetSource,
)

__all__ = [
    "CIEnvironment",
    "CommitRange",
    "Config",
    "ConfigError",
    "Err",
    "ErrorCode",
    "MessageFile",
    "NULL_COMMIT",
    "Ok",
    "Resolution",
    "ResolvedTarget",
    "Result",
    "SingleCommit",
    "TargetSource",
    "find_config",
    "load_config",
]
