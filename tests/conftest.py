"""Shared fixtures: a scripted stand-in for the git executable."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

from grg.core.runner import CommandResult


@dataclass
class Call:
    args: List[str]
    cwd: Optional[Path]
    env: Dict[str, str]


@dataclass
class FakeGit:
    """Answers clone/describe/log/rev-parse from canned values."""

    reachable: Sequence[str] = ("ssh", "https")
    tag: Optional[str] = None
    timestamp: str = "20230506050809"
    short_hash: str = "0123456789ab"
    failing: Sequence[str] = ()
    calls: List[Call] = field(default_factory=list)
    workspaces: List[Path] = field(default_factory=list)

    def run(self, args, cwd=None, env=None) -> CommandResult:
        args = list(args)
        self.calls.append(Call(args, cwd, dict(env or {})))
        command = args[0]

        if command == "clone":
            target, dest = args[-2], args[-1]
            # a failed clone can still leave a partial directory behind
            (Path(cwd) / dest).mkdir()
            self.workspaces.append(Path(cwd))
            transport = "ssh" if target.startswith("git@") else "https"
            if transport in self.reachable:
                return CommandResult(args, 0, "", "Cloning into bare repository 'repo'...\n")
            return CommandResult(args, 128, "", f"fatal: could not read from {target}\n")

        if command in self.failing:
            return CommandResult(args, 1, "", f"fatal: {command} failed\n")
        if command == "describe":
            if self.tag is None:
                return CommandResult(args, 128, "", "fatal: No names found, cannot describe anything.\n")
            return CommandResult(args, 0, f"{self.tag}\n")
        if command == "log":
            return CommandResult(args, 0, f"{self.timestamp}\n")
        if command == "rev-parse":
            return CommandResult(args, 0, f"{self.short_hash}\n")
        raise AssertionError(f"unexpected git command {args!r}")

    def commands(self) -> List[str]:
        return [c.args[0] for c in self.calls]

    def clone_targets(self) -> List[str]:
        return [c.args[-2] for c in self.calls if c.args[0] == "clone"]


@pytest.fixture
def fake_git():
    def _make(**kwargs) -> FakeGit:
        return FakeGit(**kwargs)

    return _make
