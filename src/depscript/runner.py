"""Command runner — execute compiled commands in order on a POSIX shell."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable
from typing import Any

from .context import Context
from .errors import CommandError

logger = logging.getLogger(__name__)


def run_command(command: str, ctx: Context[Any]) -> int:
    """Run a single command and return its exit status."""
    if ctx.dry_run:
        logger.info("[DRY RUN] Would run: %s", command)
        return 0
    logger.info("Running: %s", command)
    proc = subprocess.run(command, shell=True, executable=ctx.shell, check=False)
    return proc.returncode


def execute(commands: Iterable[str], ctx: Context[Any]) -> list[str]:
    """Run commands in order and return the ones that failed.

    Stops at the first failure by raising CommandError, unless the context
    asks to keep going.
    """
    failed: list[str] = []
    for command in commands:
        returncode = run_command(command, ctx)
        if returncode == 0:
            continue
        if not ctx.keep_going:
            raise CommandError(command, returncode)
        logger.warning("Command failed with exit status %d; continuing: %s", returncode, command)
        failed.append(command)
    return failed
