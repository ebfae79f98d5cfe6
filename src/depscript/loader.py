"""Script loading — read a file, optionally render it with Jinja2, and interpret it."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jinja2

from .config import Settings
from .errors import ScriptLoadError, TemplateRenderError
from .interpreter import parse
from .plan import Plan

logger = logging.getLogger(__name__)


def render(text: str, context: Mapping[str, Any] | None = None, *, source: str = "<script>") -> str:
    """Render script text as a Jinja2 template with the given context."""
    ctx = context if context is not None else {}
    env = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    try:
        template = env.from_string(text)
        return template.render(ctx)
    except jinja2.TemplateError as exc:
        raise TemplateRenderError(f"{source}: {exc}") from exc


def load(
    file: str | Path,
    *,
    context: Mapping[str, Any] | None = None,
    settings: Settings | None = None,
    variables: Mapping[str, str] | None = None,
    cwd: str | None = None,
) -> Plan:
    """Load and interpret a single script file.

    The script is rendered as a Jinja2 template only when a context is given;
    otherwise its text reaches the interpreter unchanged. Diagnostics for a
    rendered script report positions in the rendered text.
    """
    path = Path(file)
    logger.debug("Loading script %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScriptLoadError(f"{path}: {exc}") from exc
    if context is not None:
        text = render(text, context, source=str(path))
    return parse(
        text,
        filename=str(path),
        settings=settings,
        variables=variables,
        cwd=cwd,
    )
