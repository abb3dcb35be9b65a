"""Exception hierarchy shared by the resolution engine."""
from __future__ import annotations

from typing import Optional, Sequence


class GrgError(Exception):
    """Base class for every error raised by grg."""


class GitNotFoundError(GrgError):
    """The git executable could not be located. Aborts the whole run."""

    def __init__(self, message: str = "Could not find git in your PATH") -> None:
        super().__init__(message)


class InvalidIdentifierError(GrgError):
    """Repository identifier is not of the form ``host/owner/name``."""

    def __init__(self, identifier: str) -> None:
        super().__init__("invalid repository identifier; expected host/owner/name")
        self.identifier = identifier


class WorkspaceError(GrgError):
    """Temporary storage for a resolution could not be created."""


class FetchError(GrgError):
    """Every transport failed to retrieve the repository."""

    def __init__(
        self,
        message: str = "could not fetch via either transport; verify access to the repository",
        attempts: Sequence["GitExecError"] = (),
    ) -> None:
        super().__init__(message)
        self.attempts = list(attempts)


class ResolutionError(GrgError):
    """Neither a tag nor commit metadata could be read from the snapshot."""

    def __init__(self, message: str = "failed obtaining information from cloned repository") -> None:
        super().__init__(message)


class GitExecError(GrgError):
    """A git invocation exited with a non-zero status."""

    def __init__(
        self,
        status: int,
        stdout: str = "",
        stderr: str = "",
        cause: Optional[str] = None,
    ) -> None:
        self.status = status
        self.stdout = stdout
        self.stderr = stderr
        self.cause = cause if cause is not None else f"exit status {status}"
        super().__init__(f"Failed to execute git command. Exit code {status}: {self.cause}")


__all__ = [
    "GrgError",
    "GitNotFoundError",
    "InvalidIdentifierError",
    "WorkspaceError",
    "FetchError",
    "ResolutionError",
    "GitExecError",
]
