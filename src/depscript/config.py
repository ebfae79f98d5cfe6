"""Settings — interpreter and runner configuration loaded from HCL."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Any

import hcl2
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import SettingsError

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Where clones are staged, how they are fetched, and preset variables."""

    model_config = {"extra": "forbid"}

    staging_root: str = Field(default_factory=tempfile.gettempdir)
    staging_prefix: str = "depscript-"
    clone_depth: int = Field(default=1, ge=1)
    shell: str = "/bin/sh"
    variables: dict[str, str] = Field(default_factory=dict)

    @field_validator("variables", mode="before")
    @classmethod
    def merge_variables(cls, value: Any) -> Any:
        """Accept both `variables = {...}` and `variables {...}` blocks."""
        if isinstance(value, list):
            merged: dict[str, Any] = {}
            for block in value:
                merged.update(block)
            value = merged
        if isinstance(value, dict):
            return {str(k): str(v) for k, v in value.items()}
        return value


def parse_settings(text: str, *, source: str = "<settings>") -> Settings:
    """Parse HCL settings text into a validated Settings model."""
    try:
        data = hcl2.loads(text)
    except Exception as exc:
        raise SettingsError(f"{source}: {exc}") from exc
    try:
        settings = Settings.model_validate(data)
    except ValidationError as exc:
        raise SettingsError(f"{source}: {exc}") from exc
    logger.debug("Loaded settings from %s: %s", source, settings)
    return settings


def load_settings(path: str | Path) -> Settings:
    """Load settings from an HCL file."""
    file = Path(path)
    try:
        text = file.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"{file}: {exc}") from exc
    return parse_settings(text, source=str(file))
