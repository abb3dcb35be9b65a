"""Version-resolution engine for grg.

Each sub-module covers one step: workspace, fetch, metadata, resolve, report.
"""

from .errors import GrgError, GitNotFoundError  # noqa: F401
from .fetch import Transport, fetch, fetched  # noqa: F401
from .metadata import latest_commit, latest_tag  # noqa: F401
from .report import print_report, render_report, resolve_all  # noqa: F401
from .resolve import ResolutionOutcome, resolve_repository, resolve_version  # noqa: F401
from .runner import SubprocessRunner, find_git  # noqa: F401

__all__ = [
    "GrgError",
    "GitNotFoundError",
    "Transport",
    "fetch",
    "fetched",
    "latest_commit",
    "latest_tag",
    "print_report",
    "render_report",
    "resolve_all",
    "ResolutionOutcome",
    "resolve_repository",
    "resolve_version",
    "SubprocessRunner",
    "find_git",
]
