"""Batch resolution and the combined errors/requires report."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from rich.console import Console

from .fetch import DEFAULT_TRANSPORTS, Transport
from .resolve import ResolutionOutcome, resolve_repository
from .runner import ProcessRunner


console = Console(emoji=False)

ERRORS_HEADER = "The following errors were found:"


def resolve_all(
    identifiers: Iterable[str],
    runner: ProcessRunner,
    transports: Sequence[Transport] = DEFAULT_TRANSPORTS,
    verbose: bool = False,
    base_dir: Optional[Path] = None,
) -> List[ResolutionOutcome]:
    """Resolve each identifier in turn, preserving input order."""
    return [
        resolve_repository(identifier, runner, transports, verbose=verbose, base_dir=base_dir)
        for identifier in identifiers
    ]


def render_report(outcomes: Sequence[ResolutionOutcome]) -> List[str]:  # noqa: D401
    """Return report lines: a blank line, the errors block, then require lines."""
    failed = [o for o in outcomes if not o.ok]
    succeeded = [o for o in outcomes if o.ok]

    lines: List[str] = [""]
    if failed:
        lines.append(ERRORS_HEADER)
        lines.extend(f"  {o.identifier}: {o.error}" for o in failed)
        lines.append("")
    lines.extend(o.line for o in succeeded if o.line)
    return lines


def print_report(outcomes: Sequence[ResolutionOutcome]) -> None:
    for line in render_report(outcomes):
        console.print(line, markup=False, highlight=False, soft_wrap=True)


__all__ = [
    "ERRORS_HEADER",
    "resolve_all",
    "render_report",
    "print_report",
]
