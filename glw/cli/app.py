from __future__ import annotations

import shlex
from pathlib import Path

import typer

from glw import __version__
from glw.cli.context import build_context
from glw.core.errors import ErrorCode
from glw.core.result import Err
from glw.output.console import Style
from glw.output.errors import linter_exit_code, print_linter_error
from glw.services.linter import LinterService
from glw.services.resolver import CommitRangeResolver

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


@app.command()
def lint(
    files: list[Path] | None = typer.Argument(
        None,
        help="Commit message file (commit-msg hook). Extra paths are ignored.",
        show_default=False,
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the gitlint command instead of running it."
    ),
    config: Path | None = typer.Option(
        None, "--config", help="Config file (default: .glw.toml or [tool.glw] in pyproject.toml)"
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Run gitlint on the commits that matter for the current context."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))

    ctx = build_context(config)
    # The linter runs from the work-tree root, not necessarily the caller's cwd
    message_file = files[0].absolute() if files else None

    resolution = CommitRangeResolver(ctx.env, ctx.git).resolve(message_file)
    linter = LinterService(ctx.config, cwd=ctx.root)

    ctx.console.info(resolution.describe())
    if dry_run:
        ctx.console.print(shlex.join(linter.command(resolution.target)), Style.DIM)
        return

    result = linter.run(resolution.target)
    if isinstance(result, Err):
        print_linter_error(result.error, ctx.console)
        raise typer.Exit(code=linter_exit_code(result.error))


def main() -> None:
    app()
