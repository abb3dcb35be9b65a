"""Command-line interface for the grg package.

Provides the ``grg`` command via `typer`: one ``require`` line per repository.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .core import report as report_module
from .core.errors import GitNotFoundError
from .core.runner import SubprocessRunner, find_git

__all__ = ["app"]

EXIT_FAILURES = 1
EXIT_GIT_MISSING = 127

err_console = Console(stderr=True, emoji=False)

app = typer.Typer(
    help="grg – obtains a require statement based on a git repository.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def main_command(
    ctx: typer.Context,
    repos: Optional[List[str]] = typer.Argument(
        None, metavar="REPO-URL...", help="Repositories as host/owner/name", show_default=False
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", envvar="GRG_VERBOSE", help="Prints out every command and result"
    ),
    git: Optional[str] = typer.Option(
        None, "--git", envvar="GRG_GIT", help="git executable to use instead of the one on PATH"
    ),
) -> None:
    """Resolve each repository to its latest v-tag or a pseudo-version."""
    if not repos:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    _configure_logging(verbose)

    try:
        git_path = find_git(git)
    except GitNotFoundError as exc:
        err_console.print(f"[red]{exc}", highlight=False)
        raise typer.Exit(EXIT_GIT_MISSING)

    runner = SubprocessRunner(git_path, verbose=verbose)
    outcomes = report_module.resolve_all(repos, runner, verbose=verbose)
    report_module.print_report(outcomes)

    if any(not o.ok for o in outcomes):
        err_console.print("[red]One or more repositories could not be processed", highlight=False)
        raise typer.Exit(EXIT_FAILURES)


def main() -> None:  # pragma: no cover
    """Entry-point for the `python -m grg` or `grg` command."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
