"""Plan model — the ordered command list produced by one script."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from pydantic import BaseModel, Field

from .context import Context
from .runner import execute

logger = logging.getLogger(__name__)


class Plan(BaseModel):
    """Commands compiled from a script, in declaration order."""

    filename: str = "<script>"
    commands: list[str] = Field(default_factory=list)
    variables: dict[str, str] = Field(default_factory=dict)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def execute(self, **kwargs) -> list[str]:
        """Run every command. kwargs are passed to Context."""
        ctx = Context(target=self, **kwargs)
        logger.info("Executing %d command(s) from '%s'", len(self.commands), self.filename)
        return execute(self.commands, ctx)
