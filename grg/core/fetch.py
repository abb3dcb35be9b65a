"""Shallow, bare retrieval of a remote repository over SSH or HTTPS."""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import FetchError, GitExecError, InvalidIdentifierError
from .runner import ProcessRunner, echo_verbose
from .workspace import REPO_DIRNAME, Workspace, workspace


class Transport(str, Enum):
    SSH = "ssh"
    HTTPS = "https"


# Tried in this order until one succeeds.
DEFAULT_TRANSPORTS: Tuple[Transport, ...] = (Transport.SSH, Transport.HTTPS)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one clone attempt."""

    transport: Transport
    target: str
    error: Optional[GitExecError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def split_identifier(identifier: str) -> Tuple[str, str]:
    """Split *identifier* into ``(host, owner/name)``.

    Path segments beyond the first two are dropped.
    """
    host, sep, path = identifier.strip().partition("/")
    if not sep or not host or not path.strip("/"):
        raise InvalidIdentifierError(identifier)

    segments = path.split("/")
    if len(segments) > 2:
        path = "/".join(segments[:2])
    return host, path


def clone_target(identifier: str, transport: Transport) -> str:
    host, path = split_identifier(identifier)
    if transport is Transport.SSH:
        return f"git@{host}:{path}"
    return f"https://{host}/{path}"


def fetch(identifier: str, ws: Workspace, transport: Transport, runner: ProcessRunner) -> FetchResult:
    """Clone *identifier* with depth 1 and no working tree into ``ws/repo``.

    The exit status is the only success signal; output is kept for diagnostics.
    """
    target = clone_target(identifier, transport)
    result = runner.run(["clone", "--depth=1", "--bare", target, REPO_DIRNAME], cwd=ws.root)
    if result.ok:
        return FetchResult(transport, target)
    return FetchResult(transport, target, error=result.error())


@contextmanager
def fetched(
    identifier: str,
    runner: ProcessRunner,
    transports: Sequence[Transport] = DEFAULT_TRANSPORTS,
    verbose: bool = False,
    base_dir: Optional[Path] = None,
) -> Iterator[Workspace]:
    """Yield a workspace holding a snapshot fetched by the first working transport.

    Every attempt gets its own workspace, released before the next attempt
    starts. The successful one is released when the ``with`` block exits.
    """
    split_identifier(identifier)

    failures: List[GitExecError] = []
    for transport in transports:
        with workspace(base_dir) as ws:
            result = fetch(identifier, ws, transport, runner)
            if result.ok:
                yield ws
                return
        error = result.error
        if error is None:
            continue
        failures.append(error)
        if verbose:
            echo_verbose(f"Error cloning repository via {transport.value}: {error}")

    raise FetchError(attempts=failures)


__all__ = [
    "Transport",
    "DEFAULT_TRANSPORTS",
    "FetchResult",
    "split_identifier",
    "clone_target",
    "fetch",
    "fetched",
]
