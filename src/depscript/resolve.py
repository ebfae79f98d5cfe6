"""Resolver — substitute $[name] references against bound variables."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

logger = logging.getLogger(__name__)

_REF_PATTERN = re.compile(r"\$\[([^\[\]]*)\]")


class Resolver:
    """Resolve $[name] references against a variable table.

    Substitution is a single pass over the text: inserted values are never
    rescanned, and references to unbound names are left as written. Values
    are inserted verbatim with no shell quoting.
    """

    def __init__(self, variables: Mapping[str, str] | None = None) -> None:
        self._variables = variables if variables is not None else {}

    def resolve(self, value: str) -> str:
        """Replace every $[name] whose name is currently bound."""
        # Fast path: no references
        if "$[" not in value:
            return value

        def _replace(m: re.Match[str]) -> str:
            name = m.group(1)
            if name in self._variables:
                return self._variables[name]
            logger.debug("Leaving unbound reference '%s' in place", name)
            return m.group(0)

        return _REF_PATTERN.sub(_replace, value)
