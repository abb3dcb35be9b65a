"""Version resolution: tag when usable, pseudo-version otherwise."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
from typing import Optional, Sequence

from .errors import GrgError, ResolutionError
from .fetch import DEFAULT_TRANSPORTS, Transport, fetched
from .metadata import latest_commit, latest_tag
from .runner import ProcessRunner
from .workspace import Workspace


logger = logging.getLogger(__name__)

TAG_PREFIX = "v"
PSEUDO_BASE = "v0.0.0"


@dataclass(frozen=True)
class ResolutionOutcome:
    """Either a require line or an error message for one identifier."""

    identifier: str
    line: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def pseudo_version(timestamp: str, short_hash: str) -> str:
    return f"{PSEUDO_BASE}-{timestamp}-{short_hash}"


def require_line(identifier: str, version: str) -> str:
    return f"require {identifier} {version}"


def resolve_version(ws: Workspace, runner: ProcessRunner) -> str:
    """Pick the version for the snapshot in *ws*.

    A ``v``-prefixed tag is used verbatim. Anything else falls back to a
    pseudo-version built from the tip commit.
    """
    tag = latest_tag(ws, runner)
    if tag.found and tag.tag.startswith(TAG_PREFIX):
        logger.debug("Using tag %s", tag.tag)
        return tag.tag
    if tag.found:
        logger.debug("Ignoring tag %s without %r prefix", tag.tag, TAG_PREFIX)

    commit = latest_commit(ws, runner)
    if commit.found:
        return pseudo_version(commit.timestamp, commit.short_hash)

    raise ResolutionError()


def resolve_repository(
    identifier: str,
    runner: ProcessRunner,
    transports: Sequence[Transport] = DEFAULT_TRANSPORTS,
    verbose: bool = False,
    base_dir: Optional[Path] = None,
) -> ResolutionOutcome:  # noqa: D401
    """Fetch, inspect and resolve *identifier*; errors become the outcome's message."""
    try:
        with fetched(identifier, runner, transports, verbose=verbose, base_dir=base_dir) as ws:
            version = resolve_version(ws, runner)
    except GrgError as exc:
        logger.debug("Resolution of %s failed: %s", identifier, exc)
        return ResolutionOutcome(identifier, error=str(exc))

    return ResolutionOutcome(identifier, line=require_line(identifier, version))


__all__ = [
    "ResolutionOutcome",
    "pseudo_version",
    "require_line",
    "resolve_version",
    "resolve_repository",
]
