"""Result type for explicit error handling.

Git queries and subprocess calls can fail in ways that are expected and
recoverable (a ref that does not exist, a merge-base that cannot be computed).
Those failures are returned as values instead of raised, so callers choose a
fallback with a plain `match`:

    match repo.resolve_ref("origin/main"):
        case Ok(sha):
            ...
        case Err(error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Ok", "Err", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome carrying `value`."""

    value: T

    def unwrap_or(self, default: T) -> T:
        """Return the value; `default` is only used by Err."""
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed outcome carrying `error`."""

    error: E

    def unwrap_or[T](self, default: T) -> T:
        return default

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
