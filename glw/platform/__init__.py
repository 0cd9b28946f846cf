"""Platform layer: subprocess execution."""

from .process import LAUNCH_FAILED, ProcessError, run, run_streaming

__all__ = ["LAUNCH_FAILED", "ProcessError", "run", "run_streaming"]
