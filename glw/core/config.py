"""Typed configuration loading.

Configuration is optional. It is read from a `[tool.glw]` table in
`pyproject.toml`, or from top-level keys of a standalone `.glw.toml`:

    linter = ["gitlint"]
    extra_args = ["--config", ".gitlint"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str_list, get_table

__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_LINTER",
    "CONFIG_FILENAME",
    "find_config",
    "load_config",
]

DEFAULT_LINTER = ("gitlint",)
CONFIG_FILENAME = ".glw.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Linter invocation settings.

    Attributes:
        linter: Command used to start the linter
        extra_args: Arguments placed before the commit selection arguments
    """

    linter: tuple[str, ...] = DEFAULT_LINTER
    extra_args: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a parsed TOML table.

        Raises:
            ValueError: If a known key has the wrong type.
        """
        linter = _str_list_or_default(data, "linter", DEFAULT_LINTER)
        if not linter:
            raise ValueError("'linter' must not be empty")
        extra_args = _str_list_or_default(data, "extra_args", ())
        return cls(linter=linter, extra_args=extra_args)


def _str_list_or_default(
    data: Mapping[str, object], key: str, default: tuple[str, ...]
) -> tuple[str, ...]:
    if key not in data:
        return default
    value = get_str_list(data, key)
    if value is None:
        raise ValueError(f"'{key}' must be a list of strings")
    return tuple(value)


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except (UnicodeDecodeError, OSError) as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def _settings_table(path: Path, data: StrDict) -> StrDict:
    """Pick the glw table: [tool.glw] for pyproject.toml, the root otherwise."""
    if path.name != "pyproject.toml":
        return data
    tool = get_table(data, "tool") or {}
    return get_table(tool, "glw") or {}


def find_config(root: Path) -> Path | None:
    """Find the config file for a repository root.

    `.glw.toml` wins over `pyproject.toml`; a pyproject without a
    `[tool.glw]` table does not count.
    """
    standalone = root / CONFIG_FILENAME
    if standalone.is_file():
        return standalone

    pyproject = root / "pyproject.toml"
    if not pyproject.is_file():
        return None
    parsed = _parse_toml(pyproject)
    if isinstance(parsed, Err):
        return None
    tool = get_table(parsed.value, "tool") or {}
    return pyproject if get_table(tool, "glw") is not None else None


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: `.glw.toml`, `pyproject.toml`, or any TOML file with top-level keys

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(_settings_table(path, result.value)))
    except ValueError as e:
        return Err(ConfigError(f"Invalid config: {e}", path=path))

