"""Blocking execution of git commands with captured output.

The engine never calls :mod:`subprocess` directly; it talks to a
:class:`ProcessRunner` so that tests can substitute scripted results.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import shutil
import subprocess
from typing import List, Mapping, Optional, Protocol, Sequence

from rich.console import Console
from rich.markup import escape

from .errors import GitExecError, GitNotFoundError


console = Console(emoji=False)

VERBOSE_INDENT = " " * 8


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single command: exit status plus captured streams."""

    args: Sequence[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def error(self) -> GitExecError:
        return GitExecError(self.returncode, self.stdout, self.stderr)


class ProcessRunner(Protocol):
    """Anything able to run a git command and block until it finishes."""

    def run(
        self,
        args: Sequence[str],
        cwd: Optional[Path] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> CommandResult:
        ...


# ---------------------------------------------------------------------------
# Verbose echo helpers
# ---------------------------------------------------------------------------


def echo_verbose(message: str) -> None:
    console.print(f"[dim]verbose:[/dim] {escape(message)}", highlight=False, soft_wrap=True)


def echo_failure(result: CommandResult) -> None:
    """Dump captured stdout and stderr of a failed command, indented."""
    lines: List[str] = result.stdout.split("\n") + result.stderr.split("\n")
    echo_verbose("Error executing:")
    console.print(
        "\n".join(VERBOSE_INDENT + line for line in lines),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


# ---------------------------------------------------------------------------
# Subprocess implementation
# ---------------------------------------------------------------------------


class SubprocessRunner:
    """Run *git* through :func:`subprocess.run`, capturing everything."""

    def __init__(self, git: str, verbose: bool = False) -> None:
        self.git = git
        self.verbose = verbose

    def run(
        self,
        args: Sequence[str],
        cwd: Optional[Path] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> CommandResult:
        cmd = [self.git, *args]
        if self.verbose:
            echo_verbose(f"Executing {' '.join(cmd)}")

        merged_env = None
        if env:
            merged_env = {**os.environ, **env}

        try:
            proc = subprocess.run(
                cmd,
                cwd=str(cwd) if cwd is not None else None,
                env=merged_env,
                capture_output=True,
                text=True,
            )
            result = CommandResult(cmd, proc.returncode, proc.stdout, proc.stderr)
        except OSError as exc:
            result = CommandResult(cmd, -1, "", str(exc))

        if self.verbose and not result.ok:
            echo_failure(result)
        return result


def find_git(explicit: Optional[str] = None) -> str:
    """Locate the git executable, honouring an *explicit* override.

    Raises :class:`GitNotFoundError` when nothing executable is found.
    """
    found = shutil.which(explicit or "git")
    if not found:
        raise GitNotFoundError()
    return found


__all__ = [
    "CommandResult",
    "ProcessRunner",
    "SubprocessRunner",
    "echo_verbose",
    "find_git",
]
