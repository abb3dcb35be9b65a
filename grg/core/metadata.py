"""Tag and commit queries against a fetched snapshot.

Both queries are best-effort: failures are reported through ``found`` rather
than raised.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from .runner import ProcessRunner
from .workspace import Workspace


logger = logging.getLogger(__name__)

SHORT_HASH_LEN = 12
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

# Forces format-local dates to UTC whatever the host timezone is.
UTC_ENV = {"TZ": "UTC"}


@dataclass(frozen=True)
class TagInfo:
    found: bool
    tag: str = ""


@dataclass(frozen=True)
class CommitInfo:
    found: bool
    short_hash: str = ""
    timestamp: str = ""


def latest_tag(ws: Workspace, runner: ProcessRunner) -> TagInfo:
    """Nearest tag reachable from the tip, without the ``-N-gHASH`` suffix."""
    result = runner.run(["describe", "--tags", "--abbrev=0"], cwd=ws.repo_dir)
    tag = result.stdout.strip()
    if not result.ok or not tag:
        logger.debug("No tag found in %s", ws.repo_dir)
        return TagInfo(False)
    return TagInfo(True, tag)


def latest_commit(ws: Workspace, runner: ProcessRunner) -> CommitInfo:
    """UTC commit timestamp and 12 character short hash of the tip commit."""
    date_res = runner.run(
        ["log", "-1", f"--date=format-local:{TIMESTAMP_FORMAT}", "--format=%cd"],
        cwd=ws.repo_dir,
        env=UTC_ENV,
    )
    if not date_res.ok:
        return CommitInfo(False)
    timestamp = date_res.stdout.strip()

    hash_res = runner.run(["rev-parse", f"--short={SHORT_HASH_LEN}", "HEAD"], cwd=ws.repo_dir)
    if not hash_res.ok:
        return CommitInfo(False)
    # --short may print more digits when 12 would be ambiguous
    short_hash = hash_res.stdout.strip()[:SHORT_HASH_LEN]

    if not timestamp or not short_hash:
        return CommitInfo(False)
    return CommitInfo(True, short_hash, timestamp)


__all__ = [
    "TagInfo",
    "CommitInfo",
    "latest_tag",
    "latest_commit",
]
