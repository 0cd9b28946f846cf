from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from glw.core.config import Config, find_config, load_config
from glw.core.environment import CIEnvironment
from glw.core.errors import ErrorCode
from glw.core.result import Err
from glw.git.repository import GitQuery, Repository
from glw.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    env: CIEnvironment
    git: GitQuery
    config: Config
    console: ConsoleProtocol


def build_context(config_path: Path | None = None) -> CLIContext:
    console = RichConsole()
    cwd = Path.cwd()
    # Config discovery and the linter both work from the top of the work tree
    root = Repository(cwd).root().unwrap_or(cwd)

    return CLIContext(
        root=root,
        env=CIEnvironment.from_env(os.environ),
        git=Repository(root),
        config=_load_config(root, config_path, console),
        console=console,
    )


def _load_config(root: Path, explicit: Path | None, console: ConsoleProtocol) -> Config:
    if explicit is not None:
        result = load_config(explicit)
        if isinstance(result, Err):
            console.error(result.error.message)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        return result.value

    discovered = find_config(root)
    if discovered is None:
        return Config()

    result = load_config(discovered)
    if isinstance(result, Err):
        console.warning(f"{result.error.message} (using defaults)")
        return Config()
    return result.value
