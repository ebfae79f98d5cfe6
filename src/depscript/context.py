"""Runtime execution context for running a compiled plan."""

from __future__ import annotations

from typing import Generic, TypeVar

P = TypeVar("P")


class Context(Generic[P]):
    """Runtime state passed through the command runner."""

    def __init__(
        self,
        target: P,
        *,
        dry_run: bool = False,
        keep_going: bool = False,
        shell: str = "/bin/sh",
    ) -> None:
        self.target = target
        self.dry_run = dry_run
        self.keep_going = keep_going
        self.shell = shell
