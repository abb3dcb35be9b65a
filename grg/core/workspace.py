"""Ephemeral per-resolution directories."""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
import logging
import shutil
import tempfile
from typing import Iterator, Optional

from .errors import WorkspaceError


logger = logging.getLogger(__name__)

WORKSPACE_PREFIX = "grg-"
REPO_DIRNAME = "repo"


@dataclass(frozen=True)
class Workspace:
    """A temporary directory owned by exactly one fetch attempt."""

    root: Path

    @property
    def repo_dir(self) -> Path:
        """Where the bare snapshot is cloned to."""
        return self.root / REPO_DIRNAME


def acquire(base_dir: Optional[Path] = None) -> Workspace:
    """Create a fresh, uniquely named, empty directory."""
    try:
        root = tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=str(base_dir) if base_dir else None)
    except OSError as exc:
        raise WorkspaceError(f"could not create temporary workspace: {exc}") from exc
    logger.debug("Acquired workspace %s", root)
    return Workspace(Path(root))


def release(ws: Workspace) -> None:
    """Remove *ws* recursively. Failures are logged, never raised."""
    try:
        shutil.rmtree(ws.root)
    except OSError as exc:
        logger.warning("Could not remove workspace %s: %s", ws.root, exc)
    else:
        logger.debug("Released workspace %s", ws.root)


@contextmanager
def workspace(base_dir: Optional[Path] = None) -> Iterator[Workspace]:
    """Scoped :func:`acquire` with guaranteed :func:`release`."""
    ws = acquire(base_dir)
    try:
        yield ws
    finally:
        release(ws)


__all__ = [
    "Workspace",
    "acquire",
    "release",
    "workspace",
]
